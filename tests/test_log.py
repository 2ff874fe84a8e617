import pytest

from stakrun.log import LogFilter, LogLevel, LogLevelError, LogRecord, LogVisitor

SEVERITY = [LogLevel.TRACE, LogLevel.DEBUG, LogLevel.INFO, LogLevel.WARN, LogLevel.ERROR]


def test_level_names_and_values():
    assert str(LogLevel.from_value(0)) == "TRACE"
    assert str(LogLevel.from_value(5)) == "AUDIT"
    assert LogLevel.from_value(8) is LogLevel.OFF
    assert int(LogLevel.parse("off")) == 8
    assert int(LogLevel.parse("close")) == 7


def test_all_levels_order():
    assert LogLevel.all_levels() == (
        LogLevel.TRACE,
        LogLevel.DEBUG,
        LogLevel.INFO,
        LogLevel.WARN,
        LogLevel.ERROR,
        LogLevel.OFF,
        LogLevel.AUDIT,
        LogLevel.OPEN,
        LogLevel.CLOSE,
    )


@pytest.mark.parametrize("level", list(LogLevel))
def test_parse_round_trip(level):
    assert LogLevel.parse(str(level)) == level
    assert LogLevel.parse("  " + str(level).lower() + "\t") == level
    assert LogLevel.parse(str(level).capitalize()) == level


@pytest.mark.parametrize("text", ["", "   ", "xyz", "OPENX", "tracer", "o", "ınfo"])
def test_parse_invalid(text):
    with pytest.raises(LogLevelError):
        LogLevel.parse(text)


def test_error_message():
    assert str(LogLevelError()) == "invalid logging level"
    assert issubclass(LogLevelError, ValueError)


@pytest.mark.parametrize("level", list(LogLevel))
def test_from_value_round_trip(level):
    assert LogLevel.from_value(int(level)) is level


@pytest.mark.parametrize("value", [9, 255, -1])
def test_from_value_invalid(value):
    with pytest.raises(LogLevelError):
        LogLevel.from_value(value)


def test_new_filter_is_empty():
    f = LogFilter()
    assert f.is_empty()
    assert not any(f.allows(level) for level in LogLevel)
    assert str(f) == "LogFilter()"


@pytest.mark.parametrize("level", SEVERITY)
def test_severity_filter_enables_higher(level):
    f = LogFilter.from_level(level)
    for other in LogLevel:
        expected = other in SEVERITY and other >= level
        assert f.allows(other) == expected


def test_off_filter_empty():
    assert LogFilter.from_level(LogLevel.OFF).is_empty()


def test_audit_only_itself():
    f = LogFilter.from_level(LogLevel.AUDIT)
    assert [lvl for lvl in LogLevel if f.allows(lvl)] == [LogLevel.AUDIT]


def test_open_close_pair():
    a = LogFilter.from_level(LogLevel.OPEN)
    b = LogFilter.from_level(LogLevel.CLOSE)
    assert a == b
    assert a.allows(LogLevel.OPEN) and a.allows(LogLevel.CLOSE)
    assert not a.allows(LogLevel.AUDIT)


def test_or_and_ior():
    a = LogFilter.from_level(LogLevel.ERROR)
    b = LogFilter.from_level(LogLevel.AUDIT)
    c = a | b
    assert c.allows(LogLevel.ERROR) and c.allows(LogLevel.AUDIT)
    assert not c.allows(LogLevel.WARN)
    d = LogFilter()
    d |= a
    d |= b
    assert d == c
    assert a == LogFilter.from_level(LogLevel.ERROR)


def test_all_combines():
    levels = [LogLevel.WARN, LogLevel.OPEN]
    assert LogFilter.all(levels) == LogFilter.from_level(LogLevel.WARN) | LogFilter.from_level(
        LogLevel.OPEN
    )
    assert LogFilter.all([]).is_empty()


def test_display():
    assert str(LogFilter.from_level(LogLevel.WARN)) == "LogFilter(WARN,ERROR)"


def test_parse_filter():
    f = LogFilter.parse("info, Audit")
    assert f == LogFilter.from_level(LogLevel.INFO) | LogFilter.from_level(LogLevel.AUDIT)


@pytest.mark.parametrize("level", list(LogLevel))
def test_display_contents_round_trip(level):
    f = LogFilter.from_level(level)
    inner = str(f)[len("LogFilter(") : -1]
    if inner:
        assert LogFilter.parse(inner) == f
    else:
        assert f.is_empty()


@pytest.mark.parametrize("text", ["", "info,", "info,bogus", ",warn"])
def test_parse_filter_invalid(text):
    with pytest.raises(LogLevelError):
        LogFilter.parse(text)


def test_visitor_is_abstract():
    with pytest.raises(TypeError):
        LogVisitor()


class _Collect(LogVisitor):
    def __init__(self):
        self.items = []

    def kv_u64(self, key, val):
        self.items.append(("u64", key, val))

    def kv_i64(self, key, val):
        self.items.append(("i64", key, val))

    def kv_f64(self, key, val):
        self.items.append(("f64", key, val))

    def kv_bool(self, key, val):
        self.items.append(("bool", key, val))

    def kv_null(self, key):
        self.items.append(("null", key))

    def kv_str(self, key, val):
        self.items.append(("str", key, val))

    def kv_fmt(self, key, val):
        self.items.append(("fmt", key, val))

    def kv_map(self, key):
        self.items.append(("map", key))

    def kv_mapend(self, key):
        self.items.append(("mapend", key))

    def kv_arr(self, key):
        self.items.append(("arr", key))

    def kv_arrend(self, key):
        self.items.append(("arrend", key))


def test_record_kvscan_visits_pairs():
    def scan(v):
        v.kv_u64("count", 3)
        v.kv_arr("list")
        v.kv_str(None, "a")
        v.kv_arrend("list")
        v.kv_null("failed")

    rec = LogRecord(id=1, level=LogLevel.CLOSE, target="", fmt="done", kvscan=scan)
    visitor = _Collect()
    rec.kvscan(visitor)
    assert visitor.items == [
        ("u64", "count", 3),
        ("arr", "list"),
        ("str", None, "a"),
        ("arrend", "list"),
        ("null", "failed"),
    ]
    assert rec.level is LogLevel.CLOSE


def test_record_default_kvscan_visits_nothing():
    rec = LogRecord(id=0, level=LogLevel.INFO, target="t", fmt="msg")
    visitor = _Collect()
    rec.kvscan(visitor)
    assert visitor.items == []
    assert rec.fmt == "msg"