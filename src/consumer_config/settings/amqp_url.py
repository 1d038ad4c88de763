"""Builds AMQP connection URIs from discrete connection fields."""

from __future__ import annotations

from urllib.parse import quote

from .sections import RabbitMqSettings

AMQP_SCHEME = "amqp"

# Characters left unescaped per URI component, on top of letters, digits and "-_.~".
_USERINFO_SAFE = "$&+,;="
_PATH_SAFE = "/$&+,:;=@"
_HOST_SAFE = "!$&'()*+,;=:[]<>\""


def build_amqp_url(settings: RabbitMqSettings) -> str:
    """Return ``settings.amqp_url`` or assemble one from the discrete fields.

    The port segment is left out when no port is configured, credentials are
    left out without a username, and the password is left out when empty.
    Components are percent-escaped with the same character sets Go's
    ``url.URL.String()`` uses, so URIs match those built by existing workers.
    """
    if settings.amqp_url:
        return settings.amqp_url

    host = settings.host
    if settings.port:
        host = f"{host}:{settings.port}"
    host = quote(host, safe=_HOST_SAFE)

    userinfo = ""
    if settings.username:
        userinfo = quote(settings.username, safe=_USERINFO_SAFE)
        if settings.password:
            userinfo += ":" + quote(settings.password, safe=_USERINFO_SAFE)
        userinfo += "@"

    path = quote(settings.vhost, safe=_PATH_SAFE)
    if path and not path.startswith("/") and host:
        path = "/" + path

    if not (userinfo or host or path):
        return f"{AMQP_SCHEME}:"

    return f"{AMQP_SCHEME}://{userinfo}{host}{path}"
