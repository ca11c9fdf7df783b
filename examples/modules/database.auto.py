"""Eager example module: builds a fake connection from the settings module."""

id = "database"
lazy = False


class Connection:
    """Stand-in for a real database connection."""

    def __init__(self, url: str) -> None:
        self.url = url
        self.queries: list[str] = []

    def execute(self, sql: str) -> None:
        self.queries.append(sql)


def bootstrap(context):
    settings = context.get_module("settings")
    return Connection(settings["database"]["url"])
