"""Tests for ziggy.ziggy — the export pipeline end to end."""

import json

import pytest

from ziggy.binding import UrlRoutable
from ziggy.config import ZiggyConfig
from ziggy.errors import ConfigurationError
from ziggy.protocols import RouteSource, StaticUrlResolver, UrlResolver
from ziggy.routing.route import RawRoute
from ziggy.routing.router import Router
from ziggy.ziggy import Ziggy


class Post(UrlRoutable):
    def route_key_name(self) -> str:
        return "slug"


class User(UrlRoutable):
    pass


def _router() -> Router:
    router = Router()

    @router.route("/", name="home")
    def home() -> None: ...

    @router.route("/posts/{post}", methods=["GET", "HEAD"], name="posts.show")
    def show_post(post: Post) -> None: ...

    @router.route("/admin/users/{user}", name="admin.users.show")
    def admin_user(user: User) -> None: ...

    @router.route("/admin/posts", methods=["POST"], name="admin.posts.store")
    def admin_store() -> None: ...

    @router.route("/_debugbar/open", name="debugbar.openhandler")
    def debugbar() -> None: ...

    @router.route("/health")
    def health() -> None: ...

    router.compile()
    return router


class CountingSource:
    """A route source that records how often it is read."""

    def __init__(self, routes: list[RawRoute]) -> None:
        self.routes = routes
        self.calls = 0

    def list_routes(self) -> list[RawRoute]:
        self.calls += 1
        return self.routes


class TestProtocols:
    def test_router_is_route_source(self) -> None:
        assert isinstance(Router(), RouteSource)

    def test_static_resolver(self) -> None:
        resolver = StaticUrlResolver("https://example.com", {"locale": "en"})
        assert isinstance(resolver, UrlResolver)
        assert resolver.current_base_url() == "https://example.com"
        assert resolver.default_parameters() == {"locale": "en"}


class TestConstruction:
    def test_reads_router_once(self) -> None:
        source = CountingSource([RawRoute(uri="/", methods=frozenset({"GET"}), name="home")])
        ziggy = Ziggy(source, url="https://example.com")
        ziggy.snapshot()
        ziggy.to_json()
        assert source.calls == 1

    def test_routes_exclude_unnamed_and_reserved(self) -> None:
        ziggy = Ziggy(_router(), url="https://example.com")
        assert list(ziggy.routes) == ["home", "posts.show", "admin.users.show", "admin.posts.store"]

    def test_routes_read_only(self) -> None:
        ziggy = Ziggy(_router(), url="https://example.com")
        with pytest.raises(TypeError):
            ziggy.routes["x"] = ziggy.routes["home"]  # type: ignore[index]

    def test_config_skip_prefixes(self) -> None:
        ziggy = Ziggy(_router(), url="https://example.com", config=ZiggyConfig(skip_prefixes=("admin.",)))
        assert list(ziggy.routes) == ["home", "posts.show"]

    def test_trailing_slash_stripped(self) -> None:
        assert Ziggy(_router(), url="https://example.com/").url == "https://example.com"

    def test_repr(self) -> None:
        assert "routes=4" in repr(Ziggy(_router(), url="https://example.com"))


class TestBaseUrl:
    def test_explicit_url_wins(self) -> None:
        resolver = StaticUrlResolver("https://resolver.test")
        ziggy = Ziggy(_router(), url="https://explicit.test", url_resolver=resolver)
        assert ziggy.url == "https://explicit.test"

    def test_resolver(self) -> None:
        ziggy = Ziggy(_router(), url_resolver=StaticUrlResolver("https://resolver.test:8443"))
        assert ziggy.snapshot().port == 8443

    def test_config_url(self) -> None:
        ziggy = Ziggy(_router(), config=ZiggyConfig(url="https://config.test"))
        assert ziggy.url == "https://config.test"

    def test_missing_url(self) -> None:
        with pytest.raises(ConfigurationError, match="No base URL"):
            Ziggy(_router())

    def test_resolver_defaults(self) -> None:
        resolver = StaticUrlResolver("https://example.com", {"locale": "en"})
        assert Ziggy(_router(), url_resolver=resolver).to_dict()["defaults"] == {"locale": "en"}

    def test_resolver_without_defaults(self) -> None:
        class BareResolver:
            def current_base_url(self) -> str:
                return "https://bare.test"

        data = Ziggy(_router(), url_resolver=BareResolver()).to_dict()
        assert data["defaults"] == {}


class TestSnapshot:
    def test_full_output(self) -> None:
        data = json.loads(Ziggy(_router(), url="https://example.com").to_json())
        assert data == {
            "url": "https://example.com",
            "port": None,
            "defaults": {},
            "routes": {
                "home": {"uri": "/", "methods": ["GET"]},
                "posts.show": {"uri": "posts/{post}", "methods": ["GET", "HEAD"], "bindings": {"post": "slug"}},
                "admin.users.show": {"uri": "admin/users/{user}", "methods": ["GET"], "bindings": {"user": "id"}},
                "admin.posts.store": {"uri": "admin/posts", "methods": ["POST"]},
            },
        }

    def test_group(self) -> None:
        config = ZiggyConfig(groups={"admin": ["admin.*"]})
        data = Ziggy(_router(), url="https://example.com", group="admin", config=config).to_dict()
        assert list(data["routes"]) == ["admin.users.show", "admin.posts.store"]

    def test_only(self) -> None:
        config = ZiggyConfig(only=["posts.*", "home"])
        data = Ziggy(_router(), url="https://example.com", config=config).to_dict()
        assert list(data["routes"]) == ["home", "posts.show"]

    def test_except(self) -> None:
        config = ZiggyConfig(except_="admin.*")
        data = Ziggy(_router(), url="https://example.com", config=config).to_dict()
        assert list(data["routes"]) == ["home", "posts.show"]

    def test_except_and_only_export_everything(self) -> None:
        config = ZiggyConfig(except_="admin.*", only="home")
        data = Ziggy(_router(), url="https://example.com", config=config).to_dict()
        assert len(data["routes"]) == 4

    def test_wire(self) -> None:
        wire = Ziggy(_router(), url="https://example.com").to_wire()
        assert json.loads(wire)["url"] == "https://example.com"

    def test_each_snapshot_is_fresh(self) -> None:
        ziggy = Ziggy(_router(), url="https://example.com")
        assert ziggy.snapshot() is not ziggy.snapshot()
        assert ziggy.snapshot() == ziggy.snapshot()


class TestFilter:
    def test_returns_new_instance(self) -> None:
        ziggy = Ziggy(_router(), url="https://example.com")
        filtered = ziggy.filter("admin.*")
        assert filtered is not ziggy
        assert list(filtered.routes) == ["admin.users.show", "admin.posts.store"]
        assert len(ziggy.routes) == 4

    def test_exclude(self) -> None:
        ziggy = Ziggy(_router(), url="https://example.com").filter("admin.*", include=False)
        assert list(ziggy.routes) == ["home", "posts.show"]

    def test_chain(self) -> None:
        ziggy = Ziggy(_router(), url="https://example.com")
        chained = ziggy.filter(["admin.*", "home"]).filter("admin.posts.*", include=False)
        assert list(chained.routes) == ["home", "admin.users.show"]

    def test_filtered_snapshot_keeps_settings(self) -> None:
        resolver = StaticUrlResolver("https://example.com:8080", {"locale": "en"})
        snapshot = Ziggy(_router(), url_resolver=resolver).filter("posts.*").snapshot()
        assert snapshot.port == 8080
        assert snapshot.defaults == {"locale": "en"}
        assert list(snapshot.routes) == ["posts.show"]
        assert snapshot.routes["posts.show"].bindings == {"post": "slug"}
