from domain.models import ChangeSet, GenerationRequest


DIFF_CHAR_LIMIT = 15000
DEFAULT_OUTPUT_LANGUAGE = "Korean"

_PROMPT_TEMPLATE = """
You are an experienced developer. Analyze the following code changes and write a Pull Request title and description.

**Format:**
TITLE: [Type]: [Concise Title in {language}]
---
## 📝 Summary
[One line summary in {language}]

## 🛠️ Changes
- [Change 1 in {language}]
- [Change 2 in {language}]

## 💡 Notes (Optional)
- [Any impact or warnings in {language}]

**Rules:**
- Write in {language}.
- Be concise.
- STRICTLY follow the format. The first line MUST start with 'TITLE:'. The third line MUST be '---'.

**Context:**
Commits:
{commits}

Stats:
{diff_stat}

Diff:
{diff}
"""


def truncate_diff(diff: str, limit: int = DIFF_CHAR_LIMIT) -> str:
    return diff[:limit]


def build_prompt(change_set: ChangeSet, *, language: str = DEFAULT_OUTPUT_LANGUAGE) -> GenerationRequest:
    # Valores sao inseridos verbatim; str.format nao reinterpreta chaves dentro do diff.
    prompt_text = _PROMPT_TEMPLATE.format(
        language=language,
        commits="\n".join(change_set.commit_log),
        diff_stat=change_set.diff_stat,
        diff=truncate_diff(change_set.diff_body),
    )
    return GenerationRequest(prompt_text=prompt_text)
