from functools import reduce


def identity(x):
    return x


def compose(*funcs):
    """compose(f, g, h)(x) == f(g(h(x))); compose() == identity"""
    return reduce(lambda f, g: lambda x: f(g(x)), funcs, identity)


def pipe(*funcs):
    """pipe(f, g, h)(x) == h(g(f(x))); pipe() == identity"""
    return reduce(lambda f, g: lambda x: g(f(x)), funcs, identity)
