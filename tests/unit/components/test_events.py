from chartree.events import ChartEvent, Emitter


class TestEmitter:
    def test_on_and_emit(self):
        emitter = Emitter()
        calls = []
        emitter.on("beforerender", lambda *args: calls.append(args))
        emitter.emit("beforerender", 1, 2)
        assert calls == [(1, 2)]

    def test_enum_and_string_names_match(self):
        emitter = Emitter()
        calls = []
        emitter.on(ChartEvent.AFTER_RENDER, lambda: calls.append("enum"))
        emitter.on("afterrender", lambda: calls.append("str"))
        emitter.emit("afterrender")
        emitter.emit(ChartEvent.AFTER_RENDER)
        assert calls == ["enum", "str", "enum", "str"]

    def test_once(self):
        emitter = Emitter()
        calls = []
        emitter.once("afterclear", lambda: calls.append(1))
        emitter.emit("afterclear")
        emitter.emit("afterclear")
        assert calls == [1]

    def test_off_listener(self):
        emitter = Emitter()
        calls = []

        def listener():
            calls.append("removed")

        emitter.on("afterpaint", listener)
        emitter.on("afterpaint", lambda: calls.append("kept"))
        emitter.off("afterpaint", listener)
        emitter.emit("afterpaint")
        assert calls == ["kept"]

    def test_off_event_and_all(self):
        emitter = Emitter()
        calls = []
        emitter.on("a", lambda: calls.append("a"))
        emitter.on("b", lambda: calls.append("b"))
        emitter.off("a")
        emitter.emit("a")
        emitter.emit("b")
        emitter.off()
        emitter.emit("b")
        assert calls == ["b"]

    def test_events_come_in_pairs(self):
        names = {e.value for e in ChartEvent}
        for name in names:
            if name.startswith("before"):
                assert "after" + name[len("before"):] in names
