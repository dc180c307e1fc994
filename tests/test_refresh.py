from ranim.refresh import CachedMethod, CachedSelfRefMethod


def test_cached_method_calls_once():
    calls = []

    def compute():
        calls.append(1)
        return [len(calls)]

    cached = CachedMethod(compute)
    first = cached.get()
    second = cached.get()
    assert first is second
    assert len(calls) == 1
    assert first == [1]


def test_cached_method_caches_none():
    calls = []

    def compute():
        calls.append(1)
        return None

    cached = CachedMethod(compute)
    assert cached.get() is None
    assert cached.get() is None
    assert len(calls) == 1


def test_cached_self_ref_method_uses_argument():
    cached = CachedSelfRefMethod(lambda s: s * 2)
    assert cached.get(21) == 42


def test_cached_self_ref_method_keeps_first_result():
    calls = []

    def compute(s):
        calls.append(s)
        return s.upper()

    cached = CachedSelfRefMethod(compute)
    assert cached.get("abc") == "ABC"
    assert cached.get("xyz") == "ABC"
    assert calls == ["abc"]