"""
Pydantic models for strongly-typed configuration validation.
"""

import codecs
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field, field_validator


class FormatType(str, Enum):
    """Supported output format types."""
    TEXT = "text"
    JSON = "json"
    XML = "xml"


class NumberParserConfig(BaseModel):
    """Output configuration for a sort-and-persist run."""
    output_dir: Path = Field(Path("."), description="Directory the output file is written to")
    file_stem: str = Field("output", description="Output file name without extension")
    text_delimiter: str = Field(",", min_length=1, description="Separator used by the text writer")
    xml_declaration: bool = Field(False, description="Emit an <?xml ...?> declaration")
    pretty_print: bool = Field(False, description="Indent JSON and XML output")
    encoding: str = Field("utf-8", description="Character encoding of the output file")

    model_config = {"extra": "forbid"}

    @field_validator('file_stem')
    @classmethod
    def validate_file_stem(cls, v: str) -> str:
        """Ensure the stem is a bare file name."""
        if not v.strip():
            raise ValueError("file_stem cannot be empty")
        if "/" in v or "\\" in v:
            raise ValueError(f"file_stem must not contain path separators: '{v}'")
        return v

    @field_validator('encoding')
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        """Ensure the encoding is a text codec, normalised to its canonical name."""
        try:
            name = codecs.lookup(v).name
            "".encode(name)
        except LookupError as e:
            raise ValueError(f"Unsupported encoding '{v}': {e}")
        return name

    @classmethod
    def from_dict(cls, config_dict: dict) -> "NumberParserConfig":
        """
        Create NumberParserConfig from dictionary.

        Raises:
            ValidationError: If configuration is invalid
        """
        return cls.model_validate(config_dict)
