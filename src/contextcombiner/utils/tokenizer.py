# src/contextcombiner/utils/tokenizer.py
import tiktoken

ENCODING_NAMES = ("cl100k_base", "p50k_base")

class Tokenizer:
    """Rough LLM token counts for the combined context."""
    _encoding = None
    _unavailable = False

    @classmethod
    def get_encoding(cls):
        if cls._encoding is None and not cls._unavailable:
            for name in ENCODING_NAMES:
                try:
                    cls._encoding = tiktoken.get_encoding(name)
                    break
                except Exception:
                    # Encodings are fetched on first use and may be unreachable offline
                    continue
            else:
                cls._unavailable = True
        return cls._encoding

    @classmethod
    def count(cls, text: str) -> int:
        encoding = cls.get_encoding()
        if encoding is None:
            return len(text) // 4
        return len(encoding.encode(text, disallowed_special=()))

def estimate_tokens(text: str) -> int:
    return Tokenizer.count(text)
