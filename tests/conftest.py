def pytest_make_parametrize_id(config, val, argname):
    # pytest's default id generation calls getattr(val, "__name__", None),
    # which only tolerates AttributeError; fall back to the type name for
    # parameters whose __getattr__ raises something else.
    try:
        getattr(val, "__name__", None)
    except Exception:
        return type(val).__name__
    return None
