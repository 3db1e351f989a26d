import logging
from pathlib import Path
from typing import Union

import chardet

logger = logging.getLogger(__name__)


class TextExtractor:
    """
    Reads a plain-text document.

    UTF-8 is tried first. Bytes that are not valid UTF-8 go through chardet
    detection; the detected encoding is used when it decodes with fewer
    replacement characters than lossy UTF-8, whatever chardet's confidence.
    """

    def validate_file(self, file_path: Union[str, Path]) -> Path:
        path = Path(file_path)
        if not path.exists():
            raise FileNotFoundError(f"File {path} does not exist")
        return path

    def extract(self, file_path: Union[str, Path]) -> str:
        path = self.validate_file(file_path)
        raw_bytes = path.read_bytes()
        try:
            return raw_bytes.decode("utf-8")
        except UnicodeDecodeError:
            return self._decode_detected(path, raw_bytes)

    def _decode_detected(self, path: Path, raw_bytes: bytes) -> str:
        fallback = raw_bytes.decode("utf-8", errors="replace")
        detected = chardet.detect(raw_bytes)
        encoding = detected.get("encoding")
        if encoding:
            try:
                text = raw_bytes.decode(encoding)
                if text.count("\ufffd") < fallback.count("\ufffd"):
                    logger.info(
                        f"Decoded {path} as {encoding} "
                        f"(confidence {detected.get('confidence') or 0.0:.2f})"
                    )
                    return text
            except (LookupError, UnicodeDecodeError) as e:
                logger.warning(f"Decoding {path} as {encoding} failed: {e}")
        logger.warning(f"Could not detect encoding of {path}, replacing invalid bytes")
        return fallback
