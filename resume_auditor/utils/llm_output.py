import json
import re
from typing import Any

_FENCE_RE = re.compile(r"```json|```")


def strip_code_fences(text: str) -> str:
    """Remove markdown code-fence markers the model may wrap JSON in.

    Both the opening ```` ```json ```` marker and bare ```` ``` ```` markers
    are dropped wherever they appear; surrounding whitespace is trimmed.

    Args:
        text: Raw model output.

    Returns:
        str: Text with fence markers removed.
    """
    return _FENCE_RE.sub("", text).strip()


def parse_json_payload(text: str) -> Any:
    """Strip fences and decode the model output as JSON.

    Raises:
        ValueError: If the text is empty after stripping or is not valid JSON.
    """
    cleaned = strip_code_fences(text)
    if not cleaned:
        raise ValueError("EMPTY_AI_RESPONSE")
    try:
        return json.loads(cleaned)
    except json.JSONDecodeError as exc:
        raise ValueError(f"LLM returned invalid JSON: {exc}") from exc
