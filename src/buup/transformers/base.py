"""
Base transformer interface.

To add a new transformer:

1. Create a class that inherits from ``Transformer`` in the module of its family
2. Set ``id``, ``name``, ``description``, ``category`` and ``default_test_input``
3. Implement ``transform()``
4. Add the class to ``DEFAULT_TRANSFORMERS`` in ``buup.registry``
5. If it has an inverse, add the pair to ``buup.inverse``
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar

from buup.types import InvalidInputError, TransformerCategory, TransformerInfo


class Transformer(ABC):
    """
    A named, stateless text transformation.

    Instances hold no state, so a single instance can be shared across
    threads and called concurrently.
    """

    id: ClassVar[str]
    name: ClassVar[str]
    description: ClassVar[str]
    category: ClassVar[TransformerCategory]
    default_test_input: ClassVar[str] = "Hello, World!"

    @abstractmethod
    def transform(self, text: str) -> str:
        """
        Transform the input text.

        Parameters
        ----------
        text : str
            Full input text.

        Returns
        -------
        str
            Transformed text.

        Raises
        ------
        InvalidInputError
            If the input is malformed for this transformer.
        """

    def safe_transform(self, text: str) -> str:
        """
        Transform the input, returning the error message on invalid input.

        Parameters
        ----------
        text : str
            Full input text.

        Returns
        -------
        str
            Transformed text, or a description of why the input was rejected.
        """
        try:
            return self.transform(text)
        except InvalidInputError as e:
            return str(e)

    def info(self) -> TransformerInfo:
        """Return the listing record for this transformer."""
        return TransformerInfo(id=self.id, title=self.name, description=self.description)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} id={self.id!r}>"
