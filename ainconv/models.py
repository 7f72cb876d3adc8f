"""
Pydantic models for ainconv results.

These models give the command line's JSON output a fixed schema.

Usage:
    from ainconv.models import ConversionResult

    result = ConversionResult.from_conversion("aynu", "アイヌ", Script.LATN, Script.KANA)
    print(result.model_dump_json())
"""

from typing import List

from pydantic import BaseModel, Field

from ainconv.characters import basic_split, is_latin_letter
from ainconv.constants import Script
from ainconv.syllable import separate


class ConversionResult(BaseModel):
    """A text converted from one script to another."""
    text: str = Field(..., description="Input text")
    result: str = Field(..., description="Converted text")
    source: str = Field(..., description="Script code of the input (e.g. 'Latn')")
    target: str = Field(..., description="Script code of the output (e.g. 'Kana')")
    syllables: List[str] = Field(
        default_factory=list,
        description="Syllables of every word of a Latin input, in order",
    )

    @classmethod
    def from_conversion(
        cls,
        text: str,
        result: str,
        source: Script,
        target: Script,
    ) -> "ConversionResult":
        """
        Create from a finished conversion.

        Syllables are filled in only when the input is Latin.
        """
        syllables = []
        if source == Script.LATN:
            for seg_type, seg_text in basic_split(text.lower(), is_letter=is_latin_letter):
                if seg_type == 'word':
                    syllables.extend(separate(seg_text))

        return cls(
            text=text,
            result=result,
            source=source.value,
            target=target.value,
            syllables=syllables,
        )


class DetectionResult(BaseModel):
    """The script detected for a text."""
    text: str = Field(..., description="Input text")
    script: str = Field(..., description="Detected script code")

    @classmethod
    def from_detection(cls, text: str, script: Script) -> "DetectionResult":
        return cls(text=text, script=script.value)
