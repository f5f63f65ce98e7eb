"""Tests for assignability of transparent proxies."""

import pytest

import mirror


class Service:
    pass


class Other:
    pass


type_service = mirror.TypeDescriptor.of(Service)
type_other = mirror.TypeDescriptor.of(Other)


class CastingProxy(mirror.RealProxy, mirror.RemotingTypeInfo):
    """Real proxy that decides castability itself and records each request."""

    def __init__(self, verdict, proxied_type=None):
        super().__init__(proxied_type)
        self.verdict = verdict
        self.requests = []

    def can_cast_to(self, target_type, value):
        self.requests.append((target_type, value))
        return self.verdict


def test_proxy_masquerades_as_proxied_class():
    proxy = mirror.RealProxy(type_service).get_transparent_proxy()
    assert isinstance(proxy, Service)
    assert isinstance(proxy, mirror.TransparentProxy)
    assert type(proxy) is mirror.TransparentProxy


def test_get_real_proxy():
    real = mirror.RealProxy(type_service)
    proxy = mirror.TransparentProxy(real)
    assert mirror.get_real_proxy(proxy) is real
    assert mirror.get_real_proxy(Service()) is None
    assert mirror.get_real_proxy(None) is None


def test_transparent_proxy_requires_real_proxy():
    with pytest.raises(mirror.ArgumentNullError):
        mirror.TransparentProxy(None)


class TestCastCapability:
    """A RemotingTypeInfo capability decides on its own."""

    @pytest.mark.parametrize("verdict", [True, False])
    def test_verdict_returned(self, verdict):
        real = CastingProxy(verdict, type_service)
        proxy = real.get_transparent_proxy()

        assert mirror.is_assignable(type_service, proxy) is verdict
        assert real.requests == [(type_service, proxy)]

    def test_verdict_overrides_apparent_type(self):
        """Even a target the proxy masquerades as is rejected."""
        proxy = CastingProxy(False, type_service).get_transparent_proxy()
        assert isinstance(proxy, Service)
        assert not mirror.is_assignable(type_service, proxy)

    def test_verdict_for_unrelated_type(self):
        proxy = CastingProxy(True, type_service).get_transparent_proxy()
        assert mirror.is_assignable(type_other, proxy)
        assert mirror.is_assignable(mirror.type_i32, proxy)


class TestProxiedType:
    """Without a capability the proxied type replaces the target."""

    def test_resolved_type_substituted(self):
        proxy = mirror.RealProxy(type_service).get_transparent_proxy()
        assert mirror.is_assignable(type_service, proxy)
        # The target is replaced by what the proxy stands in for
        assert mirror.is_assignable(type_other, proxy)

    def test_unresolved_type_not_assignable(self):
        proxy = mirror.RealProxy().get_transparent_proxy()
        assert not mirror.is_assignable(type_service, proxy)
        assert not mirror.is_assignable(mirror.type_object, proxy)

    def test_primitive_proxied_type(self):
        proxy = mirror.RealProxy(mirror.type_i32).get_transparent_proxy()
        assert not mirror.is_assignable(mirror.type_i32, proxy)


class TestNotTransparentProxy:
    """Any proxy is rejected when proxies are not allowed."""

    def test_capability_proxy_rejected(self):
        real = CastingProxy(True, type_service)
        proxy = real.get_transparent_proxy()
        assert mirror.is_assignable(type_service, proxy)
        assert not mirror.is_assignable_and_not_transparent_proxy(type_service, proxy)
        assert real.requests == [(type_service, proxy)]

    def test_resolved_proxy_rejected(self):
        proxy = mirror.RealProxy(type_service).get_transparent_proxy()
        assert not mirror.is_assignable_and_not_transparent_proxy(type_service, proxy)

    def test_unresolved_proxy_rejected(self):
        proxy = mirror.RealProxy().get_transparent_proxy()
        assert not mirror.is_assignable_and_not_transparent_proxy(mirror.type_object, proxy)

    def test_ordinary_values_delegate(self):
        assert mirror.is_assignable_and_not_transparent_proxy(type_service, Service())
        assert mirror.is_assignable_and_not_transparent_proxy(type_service, None)
        assert mirror.is_assignable_and_not_transparent_proxy(mirror.type_i16, mirror.Int16(3))
        assert not mirror.is_assignable_and_not_transparent_proxy(type_service, Other())

    def test_missing_target_type(self):
        with pytest.raises(mirror.ArgumentNullError):
            mirror.is_assignable_and_not_transparent_proxy(None, Service())


class TestInspector:
    """The default inspector queries."""

    def test_queries(self):
        inspector = mirror.RemotingInspector()
        real = CastingProxy(True, type_service)
        proxy = real.get_transparent_proxy()

        assert inspector.is_transparent_proxy(proxy)
        assert inspector.cast_capability(proxy) is real
        assert inspector.proxied_type(proxy) == type_service

    def test_plain_real_proxy_has_no_capability(self):
        inspector = mirror.RemotingInspector()
        proxy = mirror.RealProxy(type_service).get_transparent_proxy()
        assert inspector.cast_capability(proxy) is None
        assert inspector.proxied_type(proxy) == type_service

    def test_ordinary_value(self):
        inspector = mirror.RemotingInspector()
        assert not inspector.is_transparent_proxy(Service())
        assert inspector.cast_capability(Service()) is None
        assert inspector.proxied_type(Service()) is None

    def test_custom_inspector(self):
        """Any object can be reported as a proxy by a custom inspector."""

        class EverythingIsRemote(mirror.ProxyInspector):
            def is_transparent_proxy(self, value):
                return True

            def cast_capability(self, value):
                return None

            def proxied_type(self, value):
                return type_other

        inspector = EverythingIsRemote()
        assert mirror.is_assignable(type_service, Other(), inspector=inspector)
        assert not mirror.is_assignable(type_service, Service(), inspector=inspector)
        assert not mirror.is_assignable_and_not_transparent_proxy(
            type_service, Service(), inspector=inspector)
