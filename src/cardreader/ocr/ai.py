import base64
import openai
from openai import OpenAI
from dotenv import load_dotenv

from ..config import AI_MODEL
from ..errors import OcrEngineInitError, OcrRecognitionError
from .base import OcrEngine

load_dotenv()

PROMPT = (
    "Transcribe all text in this image exactly as printed, "
    "one output line per printed line. Do not add commentary. "
    "Return an empty response if there is no text."
)


def img_part(png: bytes):
    b64 = base64.b64encode(png).decode("ascii")
    return {"type": "image_url", "image_url": {"url": f"data:image/png;base64,{b64}"}}


class AiEngine(OcrEngine):
    """Vision model OCR through the OpenAI API (needs OPENAI_API_KEY)."""

    def __init__(self, model=AI_MODEL, lang="eng", client=None):
        self.model = model
        self.lang = lang
        try:
            self.client = client or OpenAI()
        except openai.OpenAIError as e:
            raise OcrEngineInitError(f"OpenAI client unavailable: {e}") from e

    def image_to_text(self, png: bytes) -> str:
        try:
            res = self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": f"You are a precise OCR engine. Expected language: {self.lang}."},
                    {"role": "user", "content": [{"type": "text", "text": PROMPT}, img_part(png)]},
                ],
            )
        except openai.OpenAIError as e:
            raise OcrRecognitionError(f"OpenAI OCR failed: {e}") from e
        raw = res.choices[0].message.content
        # be defensive if content comes back as a list
        if isinstance(raw, list):
            raw = "".join(part.get("text", "") for part in raw if part.get("type") == "text")
        return raw or ""
