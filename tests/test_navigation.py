"""Tests for roost.navigation — current path state and link click filtering."""

import pytest

from roost.navigation import ClickEvent, Navigator, should_intercept


class TestShouldIntercept:
    def test_plain_click(self) -> None:
        assert should_intercept(ClickEvent()) is True

    @pytest.mark.parametrize(
        "event",
        [
            ClickEvent(meta_key=True),
            ClickEvent(ctrl_key=True),
            ClickEvent(shift_key=True),
            ClickEvent(button=1),
            ClickEvent(button=2),
            ClickEvent(default_prevented=True),
        ],
    )
    def test_left_to_host(self, event: ClickEvent) -> None:
        assert should_intercept(event) is False


class TestNavigator:
    def test_default_path(self) -> None:
        assert Navigator().path == "/"

    def test_navigate(self) -> None:
        nav = Navigator()
        nav.navigate("/about")
        assert nav.path == "/about"

    def test_listeners_notified(self) -> None:
        nav = Navigator()
        seen: list[str] = []
        nav.subscribe(seen.append)
        nav.navigate("/a")
        nav.navigate("/b")
        assert seen == ["/a", "/b"]

    def test_same_path_is_noop(self) -> None:
        nav = Navigator("/a")
        seen: list[str] = []
        nav.subscribe(seen.append)
        nav.navigate("/a")
        assert seen == []

    def test_unsubscribe(self) -> None:
        nav = Navigator()
        seen: list[str] = []
        unsubscribe = nav.subscribe(seen.append)
        unsubscribe()
        unsubscribe()
        nav.navigate("/a")
        assert seen == []

    def test_listener_may_unsubscribe_during_notify(self) -> None:
        nav = Navigator()
        seen: list[str] = []
        unsubscribe = None

        def once(path: str) -> None:
            seen.append(path)
            assert unsubscribe is not None
            unsubscribe()

        unsubscribe = nav.subscribe(once)
        nav.subscribe(seen.append)
        nav.navigate("/a")
        nav.navigate("/b")
        assert seen == ["/a", "/a", "/b"]

    def test_follow_plain_click(self) -> None:
        nav = Navigator()
        assert nav.follow("/about", ClickEvent()) is True
        assert nav.path == "/about"

    def test_follow_modified_click(self) -> None:
        nav = Navigator()
        assert nav.follow("/about", ClickEvent(ctrl_key=True)) is False
        assert nav.path == "/"

    def test_on_click_runs_before_navigation(self) -> None:
        nav = Navigator()
        calls: list[tuple[ClickEvent, str]] = []
        event = ClickEvent()
        assert nav.follow("/about", event, on_click=lambda e: calls.append((e, nav.path))) is True
        assert calls == [(event, "/")]
        assert nav.path == "/about"

    def test_on_click_skipped_for_modified_click(self) -> None:
        nav = Navigator()
        calls: list[ClickEvent] = []
        assert nav.follow("/about", ClickEvent(meta_key=True), on_click=calls.append) is False
        assert calls == []
