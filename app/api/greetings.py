# app/api/greetings.py


def root() -> str:
    return "Hello, World!"


def world() -> str:
    """
    Fixed sentinel used to confirm routing works.
    """
    return "hello, this is the world and the bird is the word"
