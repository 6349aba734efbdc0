from domain.description.prompt_builder import DIFF_CHAR_LIMIT, build_prompt, truncate_diff
from domain.description.response_parser import BODY_DELIMITER, TITLE_PREFIX, parse_generated_text

__all__ = [
    "BODY_DELIMITER",
    "DIFF_CHAR_LIMIT",
    "TITLE_PREFIX",
    "build_prompt",
    "parse_generated_text",
    "truncate_diff",
]
