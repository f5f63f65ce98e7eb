"""Transparent proxies and the queries used to see through them.

A transparent proxy stands in for an object that lives elsewhere. Ordinary
type checks against the class it claims to proxy always pass, so code that
needs a real answer asks a ProxyInspector instead.
"""

__all__ = [
    "RealProxy",
    "RemotingTypeInfo",
    "TransparentProxy",
    "ProxyInspector",
    "RemotingInspector",
    "NoRemotingInspector",
    "get_real_proxy",
    "default_inspector",
]

import mirror


class RealProxy:
    """Backing object of a transparent proxy.

    Args:
        proxied_type: (TypeDescriptor | None) Type the proxy claims to stand in for

    Attributes:
        proxied_type: (TypeDescriptor | None) Type the proxy claims to stand in for
    """

    def __init__(self, proxied_type=None):
        self.proxied_type = proxied_type

    def __repr__(self):
        name = self.proxied_type.name if self.proxied_type is not None else "?"
        return f"{type(self).__name__}<{name}>"

    def get_proxied_type(self):
        """Get the claimed type, or None when it cannot be resolved."""
        return self.proxied_type

    def get_transparent_proxy(self):
        """Create a transparent proxy backed by this object."""
        return TransparentProxy(self)


class RemotingTypeInfo:
    """Capability for real proxies that decide their own castability.

    Mix into a RealProxy subclass. When present, its verdict replaces every
    other assignability rule for the proxy.
    """

    def can_cast_to(self, target_type, value):
        """Check if the proxied object can be treated as target_type.

        Args:
            target_type: (TypeDescriptor) Requested type
            value: (TransparentProxy) The proxy being checked

        Returns:
            (bool) True if the proxy may be cast to target_type
        """
        raise NotImplementedError


class TransparentProxy:
    """Stand-in for an object of another type.

    The `__class__` attribute reports the Python class of the proxied type,
    which makes `isinstance` checks against that class pass.
    `type(proxy)` is still TransparentProxy.

    Args:
        real_proxy: (RealProxy) Backing object
    """

    __slots__ = ("_real_proxy",)

    def __init__(self, real_proxy):
        mirror.argument_not_none(real_proxy, "real_proxy")
        self._real_proxy = real_proxy

    def __repr__(self):
        return f"TransparentProxy({self._real_proxy!r})"

    def _get_class(self):
        proxied = self._real_proxy.get_proxied_type()
        if proxied is not None and proxied.pytype is not None:
            return proxied.pytype
        return TransparentProxy

    __class__ = property(_get_class)


def get_real_proxy(value):
    """Get the RealProxy behind a transparent proxy, or None for other values."""
    if type(value) is TransparentProxy:
        return value._real_proxy
    return None


class ProxyInspector:
    """The three remoting queries the assignability checks depend on."""

    def is_transparent_proxy(self, value):
        """(bool) Check if value is a transparent proxy."""
        raise NotImplementedError

    def cast_capability(self, value):
        """Get the RemotingTypeInfo capability of a proxy, or None."""
        raise NotImplementedError

    def proxied_type(self, value):
        """Get the TypeDescriptor a proxy stands in for, or None."""
        raise NotImplementedError


class RemotingInspector(ProxyInspector):
    """Inspector for TransparentProxy values."""

    def is_transparent_proxy(self, value):
        return type(value) is TransparentProxy

    def cast_capability(self, value):
        real = get_real_proxy(value)
        if isinstance(real, RemotingTypeInfo):
            return real
        return None

    def proxied_type(self, value):
        real = get_real_proxy(value)
        if real is None:
            return None
        return real.get_proxied_type()


class NoRemotingInspector(ProxyInspector):
    """Inspector for environments without remoting, nothing is a proxy."""

    def is_transparent_proxy(self, value):
        return False

    def cast_capability(self, value):
        return None

    def proxied_type(self, value):
        return None


default_inspector = RemotingInspector()
