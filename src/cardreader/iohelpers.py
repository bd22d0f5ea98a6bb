import pathlib
import json


def write_json(json_path: pathlib.Path, records: list):
    """Write card records as a JSON list, creating parent folders."""
    json_path = pathlib.Path(json_path)
    if json_path.suffix.lower() != ".json":
        raise ValueError(f"Unsupported output type: {json_path.suffix or '(none)'}")
    json_path.parent.mkdir(parents=True, exist_ok=True)
    with open(json_path, "w", encoding="utf-8") as f:
        json.dump([r.to_dict() for r in records], f, ensure_ascii=False, indent=2)
    return json_path
