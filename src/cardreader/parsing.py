from .regions import TextRole


def clean_name(raw: str) -> str:
    """Names are single-line; anything after the first line is OCR noise."""
    return (raw or "").split("\n", 1)[0].strip()

def clean_description(raw: str) -> str:
    return (raw or "").replace("\r\n", "\n").replace("\n", " ").strip()

def clean_text(raw: str, role) -> str:
    role = TextRole(role)
    if role is TextRole.NAME:
        return clean_name(raw)
    return clean_description(raw)
