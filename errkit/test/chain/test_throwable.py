"""Tests for errkit.chain.throwable module."""

from __future__ import annotations

from dataclasses import dataclass, field

import pytest

from errkit.chain.model import ErrorDescription
from errkit.chain.throwable import Catching, Throwable
from errkit.test.sample_errors import (
    ConnectionLost,
    NotFound,
    ProfileError,
    RequestRejected,
    SocketError,
    ValidationFailed,
)


class PositionalError(Throwable):
    pass


class Positional(PositionalError, case="positional"):
    def __init__(self, code: int, detail: str) -> None:
        super().__init__(code, detail)


@dataclass(eq=False)
class Hidden(PositionalError, case="hidden"):
    visible: str
    secret: str = field(default="", repr=False)


class TestCaseDeclaration:
    def test_case_and_family_names(self) -> None:
        assert NotFound.case_name == "not_found"
        assert NotFound.family_name == "FileError"

    def test_family_has_no_case(self) -> None:
        assert ProfileError.case_name is None
        assert ProfileError.family_name is None

    def test_is_variant(self) -> None:
        assert NotFound(path="/a").is_variant is True
        assert SocketError().is_variant is False

    def test_describe_variant_with_labels(self) -> None:
        description = RequestRejected(status=503, error=SocketError()).describe()
        assert description.kind == "RequestError.rejected"
        assert description.associated_data == (("status", "503"),)
        assert description.is_variant is True

    def test_cause_field_is_not_associated_data(self) -> None:
        assert ConnectionLost(error=SocketError()).describe().associated_data == ()

    def test_positional_args_use_index_labels(self) -> None:
        description = Positional(7, "boom").describe()
        assert description == ErrorDescription(
            kind="PositionalError.positional",
            associated_data=(("0", "7"), ("1", "boom")),
            is_variant=True,
        )

    def test_fields_hidden_from_repr_are_not_associated_data(self) -> None:
        assert Hidden(visible="a", secret="b").describe().associated_data == (("visible", "a"),)

    def test_aggregate_dataclass(self) -> None:
        assert SocketError(port=1).describe() == ErrorDescription("SocketError [Struct]")

    def test_aggregate_class(self) -> None:
        assert ProfileError("x").describe() == ErrorDescription("ProfileError [Class]")


class TestWrappedCause:
    def test_from_cause_field(self) -> None:
        inner = SocketError()
        assert ConnectionLost(error=inner).wrapped_cause is inner

    def test_none_without_cause_field(self) -> None:
        assert NotFound(path="/a").wrapped_cause is None
        assert ProfileError("x").wrapped_cause is None


class TestUserFriendlyMessage:
    def test_override(self) -> None:
        assert NotFound(path="/a").user_friendly_message == "Could not find /a."

    def test_str_is_the_message(self) -> None:
        assert str(NotFound(path="/a")) == "Could not find /a."

    def test_default_from_args(self) -> None:
        assert ProfileError("profile is locked").user_friendly_message == "profile is locked"

    def test_default_for_dataclass_case(self) -> None:
        error = ValidationFailed(names=["email"])
        assert error.user_friendly_message == "ProfileError.validation_failed(names: ['email'])"

    def test_default_without_anything(self) -> None:
        assert ProfileError().user_friendly_message == "ProfileError [Class]"


class TestCatching:
    def test_family_gets_a_caught_case(self) -> None:
        caught = ProfileError.caught(KeyError("k"))
        assert isinstance(caught, ProfileError)
        assert type(caught) is ProfileError.Caught
        assert caught.describe() == ErrorDescription("ProfileError.caught", is_variant=True)

    def test_caught_wraps_the_error(self) -> None:
        inner = KeyError("k")
        assert ProfileError.caught(inner).wrapped_cause is inner

    def test_caught_message_comes_from_the_inner_error(self) -> None:
        assert ProfileError.caught(NotFound(path="/a")).user_friendly_message == "Could not find /a."
        assert ProfileError.caught(ValueError("bad value")).user_friendly_message == "bad value"

    def test_caught_repr(self) -> None:
        assert repr(ProfileError.caught(KeyError("k"))) == "ProfileError.Caught(KeyError('k'))"

    def test_catch_wraps_foreign_errors(self) -> None:
        def load() -> None:
            raise OSError("disk on fire")

        with pytest.raises(ProfileError) as excinfo:
            ProfileError.catch(load)
        assert isinstance(excinfo.value, ProfileError.Caught)
        assert isinstance(excinfo.value.wrapped_cause, OSError)
        assert excinfo.value.__cause__ is excinfo.value.wrapped_cause

    def test_catch_passes_own_errors_through(self) -> None:
        error = ValidationFailed(names=["email"])

        def validate() -> None:
            raise error

        with pytest.raises(ValidationFailed) as excinfo:
            ProfileError.catch(validate)
        assert excinfo.value is error

    def test_catch_returns_value(self) -> None:
        assert ProfileError.catch(lambda a, b: a + b, 1, b=2) == 3

    def test_catching_context_manager(self) -> None:
        with pytest.raises(ProfileError) as excinfo:
            with ProfileError.catching():
                raise KeyError("k")
        assert isinstance(excinfo.value.wrapped_cause, KeyError)

    def test_nested_catching_does_not_double_wrap(self) -> None:
        with pytest.raises(ProfileError) as excinfo:
            with ProfileError.catching():
                with ProfileError.catching():
                    raise KeyError("k")
        assert isinstance(excinfo.value.wrapped_cause, KeyError)

    def test_sub_family_gets_its_own_caught_case(self) -> None:
        class AvatarError(ProfileError):
            pass

        assert AvatarError.Caught is not ProfileError.Caught
        assert AvatarError.caught(KeyError()).describe().kind == "AvatarError.caught"

    def test_non_catching_family_has_no_caught_case(self) -> None:
        assert not issubclass(PositionalError, Catching)
        assert not hasattr(PositionalError, "Caught")
