from pathlib import Path


def centre_line(line: str, width: int) -> str:
    """Indent ``line`` so its middle sits under the middle of ``width`` columns."""
    return " " * max(0, width // 2 - len(line) // 2) + line


def compose_banner(art: str, slogan: str = "", width: int | None = None) -> str:
    """Append ``slogan`` on its own line, centred under the art."""
    slogan = slogan.strip()
    if not slogan:
        return art
    if width is None:
        width = max((len(line) for line in art.splitlines()), default=0)
    return f"{art}\n{centre_line(slogan, width)}"


def write_banner(path: str | Path, text: str) -> Path:
    path = Path(path)
    path.write_text(text if text.endswith("\n") else text + "\n", encoding="utf-8")
    return path
