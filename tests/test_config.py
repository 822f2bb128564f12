"""Tests for routekit.config — RegistrationOptions and option modifiers."""

import dataclasses

import pytest

from routekit.config import (
    RegistrationOptions,
    with_decorator,
    with_mapper,
    with_middlewares,
    with_registrar,
    with_sticky_route_registrar,
)
from routekit.decorator import MiddlewareDecorator
from routekit.errors import ConfigurationError
from routekit.handler import map_handler
from routekit.routing.registrar import MethodScopedRegistrar, bind_registrar


def _identity(handler):  # noqa: ANN001, ANN202
    return handler


class TestDefaults:
    def test_defaults(self) -> None:
        options = RegistrationOptions()
        assert options.mapper is map_handler
        assert options.registrar is bind_registrar
        assert options.decorators == ()
        assert options.sticky_route_registrar is False

    def test_build_without_modifiers(self) -> None:
        assert RegistrationOptions.build() == RegistrationOptions()

    def test_frozen(self) -> None:
        options = RegistrationOptions()
        with pytest.raises(dataclasses.FrozenInstanceError):
            options.mapper = _identity  # type: ignore[misc]


class TestModifiers:
    def test_with_mapper(self) -> None:
        assert RegistrationOptions.build(with_mapper(_identity)).mapper is _identity

    def test_with_registrar(self) -> None:
        registrar = MethodScopedRegistrar()
        assert RegistrationOptions.build(with_registrar(registrar)).registrar is registrar

    def test_last_registrar_wins(self) -> None:
        first = MethodScopedRegistrar("first")
        second = MethodScopedRegistrar("second")
        options = RegistrationOptions.build(with_registrar(first), with_registrar(second))
        assert options.registrar is second

    def test_decorators_appended_in_call_order(self) -> None:
        def a(h):  # noqa: ANN001, ANN202
            return h

        def b(h):  # noqa: ANN001, ANN202
            return h

        options = RegistrationOptions.build(with_decorator(a), with_decorator(b))
        assert options.decorators == (a, b)

    def test_with_middlewares_appends_one_decorator(self) -> None:
        async def m0(w, r, next):  # noqa: ANN001, ANN202
            await next.serve(w, r)

        async def m1(w, r, next):  # noqa: ANN001, ANN202
            await next.serve(w, r)

        options = RegistrationOptions.build(with_decorator(_identity), with_middlewares(m0, m1))
        assert len(options.decorators) == 2
        assert options.decorators[0] is _identity
        assert options.decorators[1] == MiddlewareDecorator((m0, m1))

    def test_sticky_flag(self) -> None:
        assert RegistrationOptions.build(with_sticky_route_registrar()).sticky_route_registrar is True
        options = RegistrationOptions.build(
            with_sticky_route_registrar(),
            with_sticky_route_registrar(False),
        )
        assert options.sticky_route_registrar is False

    def test_modifiers_do_not_mutate(self) -> None:
        base = RegistrationOptions()
        updated = with_decorator(_identity)(base)
        assert base.decorators == ()
        assert updated.decorators == (_identity,)

    @pytest.mark.parametrize("modifier", [with_mapper, with_registrar, with_decorator])
    def test_rejects_non_callable(self, modifier) -> None:  # noqa: ANN001
        with pytest.raises(ConfigurationError, match="must be callable"):
            modifier("nope")
