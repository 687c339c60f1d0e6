"""Rendering a snapshot for the browser.

Two outputs, for the two ways clients pick up routes:

- ``routes_script`` — an inline ``<script>`` tag for page templates,
  also exposed to kida templates as ``ziggy_routes()``
- ``routes_module`` — an ES module written at build time by
  ``ziggy generate``
"""

import html
from collections.abc import Sequence

from kida import Environment
from kida.utils.html import Markup

from ziggy.config import ZiggyConfig
from ziggy.protocols import RouteSource, UrlResolver
from ziggy.serializer import ZiggySnapshot, to_json
from ziggy.ziggy import Ziggy

# Characters that could end a <script> element or open a comment inside it.
# They only occur inside JSON strings, where \uXXXX escapes are equivalent.
_SCRIPT_ESCAPES = str.maketrans({"<": "\\u003c", ">": "\\u003e", "&": "\\u0026"})


def script_safe_json(snapshot: ZiggySnapshot) -> str:
    """Return the snapshot JSON, safe to embed in an HTML ``<script>``."""
    return to_json(snapshot).translate(_SCRIPT_ESCAPES)


def routes_script(
    snapshot: ZiggySnapshot,
    *,
    nonce: str | None = None,
    variable: str = "Ziggy",
) -> Markup:
    """Build the ``<script>`` tag that defines the route table.

    Args:
        snapshot: The export to render.
        nonce: Content-Security-Policy nonce for the tag, if any.
        variable: Global variable name the snapshot is assigned to.
    """
    nonce_attr = f' nonce="{html.escape(nonce)}"' if nonce else ""
    return Markup(
        f'<script type="text/javascript"{nonce_attr}>'
        f"const {variable} = {script_safe_json(snapshot)};"
        "</script>"
    )


def routes_module(snapshot: ZiggySnapshot) -> str:
    """Build an ES module exporting the route table.

    Routes already defined on ``window.Ziggy`` (e.g. by ``routes_script``)
    are merged in at load time.
    """
    return (
        f"const Ziggy = {to_json(snapshot)};\n"
        "\n"
        "if (typeof window !== 'undefined' && typeof window.Ziggy !== 'undefined') {\n"
        "    Object.assign(Ziggy.routes, window.Ziggy.routes);\n"
        "}\n"
        "\n"
        "export { Ziggy };\n"
    )


def register_template_global(
    env: Environment,
    router: RouteSource,
    *,
    url: str | None = None,
    url_resolver: UrlResolver | None = None,
    config: ZiggyConfig | None = None,
    name: str = "ziggy_routes",
) -> None:
    """Expose ``ziggy_routes(group=None, nonce=None)`` to kida templates.

    Each call builds a fresh export, so templates always see the current
    routes::

        register_template_global(env, router, url="https://example.com")

        {{ ziggy_routes() }}
        {{ ziggy_routes(group="admin", nonce=csp_nonce) }}
    """

    def ziggy_routes(
        group: str | Sequence[str] | None = None,
        nonce: str | None = None,
    ) -> Markup:
        ziggy = Ziggy(
            router,
            group=group,
            url=url,
            url_resolver=url_resolver,
            config=config,
        )
        return routes_script(ziggy.snapshot(), nonce=nonce)

    env.add_global(name, ziggy_routes)
