from abc import ABC, abstractmethod


class OcrEngine(ABC):
    """
    Interface for the external text recognition capability.
    Engines get a losslessly encoded (PNG) image and return the raw text;
    cleaning is the caller's job.
    """

    lang = "eng"

    @abstractmethod
    def image_to_text(self, png: bytes) -> str:
        raise NotImplementedError
