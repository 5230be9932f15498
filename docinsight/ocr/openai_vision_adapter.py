import httpx
import openai

from docinsight.ocr.base import BaseOcrClient
from docinsight.ocr.exceptions import OcrError

_OCR_INSTRUCTION = (
    "Transcribe all readable text in this business document. "
    "Keep numbers, units, dates and table rows exactly as shown. "
    "Return plain text only, without commentary."
)


class OpenAIVisionAdapter(BaseOcrClient):
    """OCR through a vision-capable chat model on an OpenAI-compatible API."""

    def __init__(
        self,
        *,
        api_key: str,
        model: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._model = model
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
        )

    def extract_text(self, *, data_base64: str, mime_type: str, file_name: str) -> str:
        try:
            response = self._client.chat.completions.create(
                model=self._model,
                temperature=0.0,
                messages=[
                    {
                        "role": "user",
                        "content": [
                            {"type": "text", "text": _OCR_INSTRUCTION},
                            self._file_part(data_base64, mime_type, file_name),
                        ],
                    }
                ],
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise OcrError(f"OCR provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise OcrError(f"OCR provider API error: {exc}") from exc

        if not response.choices:
            raise OcrError("OCR provider returned no choices")
        content = response.choices[0].message.content
        if content is None:
            raise OcrError("OCR provider returned empty response")
        return content

    @staticmethod
    def _file_part(data_base64: str, mime_type: str, file_name: str) -> dict[str, object]:
        data_url = f"data:{mime_type};base64,{data_base64}"
        if mime_type == "application/pdf":
            return {"type": "file", "file": {"filename": file_name, "file_data": data_url}}
        return {"type": "image_url", "image_url": {"url": data_url}}
