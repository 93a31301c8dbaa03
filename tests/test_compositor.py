"""Tests for the compositor: layout fan-out, event handling and the loop."""

import pytest

from termcomp.compositor import AppendLine, Compositor, find_list
from termcomp.core.input import Key, KeyEvent, MouseEvent, ResizeEvent
from termcomp.core.keymap import Action
from termcomp.core.screen import MemoryScreen
from termcomp.widgets import BorderedWidget, ListWidget, Rect, SplitWidget, TextWidget


class PostingProducer:
    """Producer that posts a fixed batch of events when started."""

    def __init__(self, compositor: Compositor, *events) -> None:
        self.compositor = compositor
        self.events = events
        self.started = False

    def start(self) -> None:
        self.started = True
        for event in self.events:
            self.compositor.post(event)


class TestResize:
    """Tests for root resize fan-out."""

    def test_without_layout_every_widget_gets_root(self, screen: MemoryScreen) -> None:
        comp = Compositor(screen)
        a = comp.add(TextWidget())
        b = comp.add(BorderedWidget(TextWidget()))
        comp.resize(Rect(0, 0, 9, 4))
        assert comp.rect == Rect(0, 0, 9, 4)
        assert a.get_rect() == Rect(0, 0, 9, 4)
        assert b.get_rect() == Rect(0, 0, 9, 4)

    def test_layout_function_assigns_rects(self, screen: MemoryScreen) -> None:
        def halves(root: Rect) -> list[Rect]:
            return [Rect(root.x0, root.y0, root.x1, 1), Rect(root.x0, 2, root.x1, root.y1)]

        comp = Compositor(screen, layout=halves)
        top = comp.add(TextWidget())
        bottom = comp.add(TextWidget())
        comp.resize(Rect(0, 0, 9, 5))
        assert top.get_rect() == Rect(0, 0, 9, 1)
        assert bottom.get_rect() == Rect(0, 2, 9, 5)

    def test_layout_count_mismatch(self, screen: MemoryScreen) -> None:
        comp = Compositor(screen, layout=lambda root: [root])
        comp.add(TextWidget())
        comp.add(TextWidget())
        with pytest.raises(ValueError):
            comp.resize(Rect(0, 0, 9, 9))


class TestRender:
    """Tests for rendering order."""

    def test_later_widgets_overdraw_earlier(self, screen: MemoryScreen) -> None:
        comp = Compositor(screen, layout=lambda root: [Rect(0, 0, 4, 0), Rect(2, 0, 3, 0)])
        comp.add(TextWidget("aaaaa"))
        comp.add(TextWidget("bb"))
        comp.resize(Rect(0, 0, 39, 11))
        comp.render()
        assert screen.grid.row_text(0).startswith("aabba")

    def test_bordered_list(self, compositor: Compositor, screen: MemoryScreen) -> None:
        compositor.render()
        assert screen.grid.row_text(0).startswith("┌log")
        assert screen.grid.row_text(1).startswith("│a ")
        assert screen.grid.get(1, 1).style.underline


class TestFocus:
    """Tests for locating the list that receives navigation."""

    def test_find_list_through_containers(self) -> None:
        target = ListWidget(["x"])
        tree = BorderedWidget(SplitWidget(TextWidget(), BorderedWidget(target)))
        assert find_list(tree) is target

    def test_find_list_prefers_left(self) -> None:
        first, second = ListWidget(), ListWidget()
        assert find_list(SplitWidget(first, second)) is first

    def test_no_list(self) -> None:
        assert find_list(BorderedWidget(TextWidget())) is None

    def test_focus_index_selects_widget(self, screen: MemoryScreen) -> None:
        comp = Compositor(screen)
        a = ListWidget(["a"])
        b = ListWidget(["b"])
        comp.add(a)
        comp.add(BorderedWidget(b))
        assert comp.focus_target() is a
        comp.focused_widget_id = 1
        assert comp.focus_target() is b
        comp.focused_widget_id = 5
        assert comp.focus_target() is None


class TestHandleEvent:
    """Tests for single event handling."""

    def test_navigation_keys(self, compositor: Compositor) -> None:
        target = compositor.focus_target()
        compositor.handle_event(KeyEvent(char='j'))
        compositor.handle_event(KeyEvent(key=Key.DOWN))
        assert target.selected == 2
        compositor.handle_event(KeyEvent(char='k'))
        assert target.selected == 1
        compositor.handle_event(KeyEvent(char='G'))
        assert target.selected == 4
        compositor.handle_event(KeyEvent(char='g'))
        assert (target.selected, target.offset) == (0, 0)

    def test_mouse_wheel(self, compositor: Compositor) -> None:
        target = compositor.focus_target()
        compositor.handle_event(MouseEvent(3, 3, MouseEvent.WHEEL_DOWN))
        assert target.selected == 1
        compositor.handle_event(MouseEvent(3, 3, MouseEvent.WHEEL_UP))
        assert target.selected == 0

    def test_unbound_key_ignored(self, compositor: Compositor) -> None:
        compositor.running = True
        compositor.handle_event(KeyEvent(char='x'))
        assert compositor.running
        assert compositor.focus_target().selected == 0

    @pytest.mark.parametrize("event", [KeyEvent(char='q'), KeyEvent(key=Key.CTRL_C)])
    def test_quit(self, compositor: Compositor, event: KeyEvent) -> None:
        compositor.running = True
        compositor.handle_event(event)
        assert compositor.running is False

    def test_resize_event(self, compositor: Compositor, screen: MemoryScreen) -> None:
        compositor.handle_event(screen.set_size(20, 6))
        assert compositor.rect == Rect(0, 0, 19, 5)
        assert compositor.widgets[0].get_rect() == Rect(0, 0, 19, 5)
        assert compositor.focus_target().get_rect() == Rect(1, 1, 18, 4)
        assert screen.syncs == 1
        assert screen.size() == (20, 6)

    def test_append_line_follows_tail(self, screen: MemoryScreen) -> None:
        comp = Compositor(screen)
        log = ListWidget(["a", "b", "c"])
        comp.add(log)
        comp.resize(Rect(0, 0, 9, 1))
        comp.handle_event(AppendLine(log, "d"))
        assert log.lines == ["a", "b", "c", "d"]
        assert (log.selected, log.offset) == (3, 2)

    def test_apply_without_target(self, screen: MemoryScreen) -> None:
        comp = Compositor(screen)
        comp.add(TextWidget())
        comp.apply(Action.DOWN)


class TestRunLoop:
    """Tests for the full loop on a headless screen."""

    def test_quits_on_q(self, compositor: Compositor, screen: MemoryScreen) -> None:
        screen.push(KeyEvent(char='j'), KeyEvent(char='q'))
        compositor.run()
        assert compositor.running is False
        assert compositor.focus_target().selected == 1
        assert screen.shows == 2
        assert screen.mouse_enabled

    def test_sizes_tree_from_screen(self, screen: MemoryScreen) -> None:
        comp = Compositor(screen)
        widget = comp.add(TextWidget())
        screen.push(KeyEvent(char='q'))
        comp.run()
        assert comp.rect == Rect(0, 0, 39, 11)
        assert widget.get_rect() == Rect(0, 0, 39, 11)

    def test_producer_data_rendered(self, compositor: Compositor, screen: MemoryScreen) -> None:
        log = compositor.focus_target()
        producer = PostingProducer(compositor, AppendLine(log, "new line"), KeyEvent(char='q'))
        compositor.add_producer(producer)
        compositor.run()
        assert producer.started
        assert log.selected_line == "new line"
        assert screen.shows == 2
        assert "new line" in screen.grid.row_text(6)

    def test_resize_during_loop(self, compositor: Compositor, screen: MemoryScreen) -> None:
        screen.push(screen.set_size(12, 4), KeyEvent(char='q'))
        compositor.run()
        assert screen.grid.row_text(0) == "┌log───────┐"
        assert screen.grid.row_text(3) == "└──────────┘"

    def test_keyboard_interrupt_ends_loop(self) -> None:
        class Interrupting(MemoryScreen):
            def show(self) -> None:
                raise KeyboardInterrupt

        comp = Compositor(Interrupting(10, 3))
        comp.add(TextWidget())
        comp.run()
        assert comp.running is False

    def test_errors_propagate(self) -> None:
        class Broken(TextWidget):
            def render(self, surface) -> None:
                raise RuntimeError("render failed")

        screen = MemoryScreen(10, 3)
        comp = Compositor(screen)
        comp.add(Broken())
        with pytest.raises(RuntimeError):
            with screen.session():
                comp.run()
        assert not screen.active
