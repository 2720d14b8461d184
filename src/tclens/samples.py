from __future__ import annotations

from tclens.util.languages import AUTO, normalize_language

DEFAULT_SAMPLE_FUNCTION = "twoSum"

SAMPLES = {
    "javascript": """function twoSum(nums, target) {
  const seen = new Map()
  for (let i = 0; i < nums.length; i++) {
    const complement = target - nums[i]
    if (seen.has(complement)) return [seen.get(complement), i]
    seen.set(nums[i], i)
  }
  return []
}""",
    "python": """def twoSum(nums, target):
    seen = {}
    for i, num in enumerate(nums):
        complement = target - num
        if complement in seen:
            return [seen[complement], i]
        seen[num] = i
    return []""",
    "java": """public int[] twoSum(int[] nums, int target) {
    HashMap<Integer, Integer> seen = new HashMap<>();
    for (int i = 0; i < nums.length; i++) {
        int complement = target - nums[i];
        if (seen.containsKey(complement)) {
            return new int[] { seen.get(complement), i };
        }
        seen.put(nums[i], i);
    }
    return new int[] {};
}""",
}


def sample_for(language: str | None) -> str:
    lang = normalize_language(language)
    if lang == AUTO:
        lang = "javascript"
    try:
        return SAMPLES[lang]
    except KeyError:
        raise KeyError(f"No sample for language {language!r}") from None
