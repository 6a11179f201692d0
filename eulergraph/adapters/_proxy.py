class BackendProxy:
    def __init__(self, store, backend_name):
        from .manager import ensure_materialized

        self._backend = ensure_materialized(backend_name, store)

    def __getattr__(self, name):
        # Try backend-level function (e.g., networkx.is_eulerian)
        fn = getattr(self._backend["module"], name, None)
        if fn:

            def wrapped(*args, **kwargs):
                return fn(self._backend["graph"], *args, **kwargs)

            return wrapped

        # Otherwise forward attribute to the backend graph itself
        return getattr(self._backend["graph"], name)
