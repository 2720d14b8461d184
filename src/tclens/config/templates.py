"""Templates for generated tclens configuration files."""

DEFAULT_CONFIG = """# tclens configuration
# Language of analyzed snippets: auto, python, javascript or java.
language: "auto"
# Function whose self-calls count as recursion (empty disables detection).
function_name: ""
# Report format printed by `tclens analyze`: md or json.
format: "md"
# Remember the last draft and result for `tclens last`.
save_last: true
state_path: ".tclens/last_session.json"
show_observations: true
"""
