from __future__ import annotations

from pathlib import Path

AUTO = "auto"

LANGUAGE_ALIASES = {
    "py": "python",
    "python": "python",
    "python3": "python",
    "js": "javascript",
    "jsx": "javascript",
    "mjs": "javascript",
    "cjs": "javascript",
    "node": "javascript",
    "javascript": "javascript",
    "java": "java",
}

LANGUAGE_EXTENSIONS = {
    "python": [".py"],
    "javascript": [".js", ".jsx", ".mjs", ".cjs"],
    "java": [".java"],
}

SUPPORTED_LANGUAGES = sorted(LANGUAGE_EXTENSIONS.keys())


def normalize_language(name: str | None) -> str:
    key = (name or "").strip().lower()
    if not key:
        return AUTO
    return LANGUAGE_ALIASES.get(key, key)


def is_supported(name: str | None) -> bool:
    lang = normalize_language(name)
    return lang == AUTO or lang in SUPPORTED_LANGUAGES


def language_for_path(path: Path) -> str | None:
    suffix = path.suffix.lower()
    for lang, extensions in LANGUAGE_EXTENSIONS.items():
        if suffix in extensions:
            return lang
    return None
