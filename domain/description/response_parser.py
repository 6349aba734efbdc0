from domain.models import GenerationResult


TITLE_PREFIX = "TITLE:"
BODY_DELIMITER = "---"


def _extract_title(lines: list[str]) -> str:
    for line in lines:
        if line.startswith(TITLE_PREFIX):
            return line[len(TITLE_PREFIX):].strip()
    return ""


def _find_delimiter(lines: list[str]) -> int | None:
    for line_index, line in enumerate(lines):
        if line == BODY_DELIMITER:
            return line_index
    return None


def parse_generated_text(text: str) -> GenerationResult:
    lines = text.splitlines()
    title = _extract_title(lines)

    delimiter_index = _find_delimiter(lines)
    if delimiter_index is None:
        # Sem "---" o modelo fugiu do formato: usa tudo apos a primeira linha.
        body_lines = lines[1:]
    else:
        body_lines = lines[delimiter_index + 1:]

    return GenerationResult(
        title=title,
        body="\n".join(body_lines).rstrip("\n"),
        delimiter_found=delimiter_index is not None,
    )
