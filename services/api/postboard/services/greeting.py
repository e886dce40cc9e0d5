"""Greeting shown on the landing page and the API info route."""


def greet(name: str) -> str:
    return f"Hello, {name}!"
