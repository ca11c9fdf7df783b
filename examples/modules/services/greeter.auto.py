"""Lazy example module declared with the @module decorator."""

from autoloader import module


@module(id="greeter", lazy=True)
def greeter(context):
    settings = context.get_module("settings")
    db = context.get_module("database")

    def greet(name: str) -> str:
        db.execute(f"INSERT INTO visits VALUES ('{name}')")
        return f"Hello, {name}! Welcome to {settings['app_name']}."

    return greet
