import sys
from pathlib import Path
from typing import Literal

import pytest
from pydantic import BaseModel

sys.path.append(str(Path(__file__).resolve().parent.parent / "src"))

from jsonfs.errors import ValidationError
from jsonfs.schema import PydanticSchema, Schema, as_schema


class Settings(BaseModel):
    theme: Literal["light", "dark"]
    volume: int = 5


def test_validate_returns_model():
    schema = PydanticSchema(Settings)
    assert schema.validate({"theme": "dark"}) == Settings(theme="dark", volume=5)


def test_validate_failure_raises_store_error():
    schema = PydanticSchema(Settings)
    with pytest.raises(ValidationError) as excinfo:
        schema.validate({"theme": "red"})
    assert "theme" in excinfo.value.reason
    assert excinfo.value.errors[0]["loc"] == ("theme",)


def test_strict_mode_rejects_coercion():
    assert PydanticSchema(dict[str, int]).validate({"a": "1"}) == {"a": 1}
    with pytest.raises(ValidationError):
        PydanticSchema(dict[str, int], strict=True).validate({"a": "1"})


def test_dump_produces_json_tree():
    schema = PydanticSchema(Settings)
    assert schema.dump(Settings(theme="light")) == {"theme": "light", "volume": 5}


class UppercaseKeys:
    def validate(self, value):
        if not all(key.isupper() for key in value):
            raise ValidationError("keys must be uppercase")
        return value

    def dump(self, value):
        return value


def test_as_schema_keeps_custom_schema():
    custom = UppercaseKeys()
    assert isinstance(custom, Schema)
    assert as_schema(custom) is custom


def test_as_schema_wraps_types():
    wrapped = as_schema(Settings)
    assert isinstance(wrapped, PydanticSchema)
    assert wrapped.type is Settings
    assert isinstance(as_schema(dict[str, int]), PydanticSchema)
