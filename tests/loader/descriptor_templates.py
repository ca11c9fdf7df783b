"""Descriptor file templates shared by the loader tests."""

PLAIN_DESCRIPTOR = """\
id = "{module_id}"
lazy = {lazy}


def bootstrap(context):
    return "{module_id}-value"
"""

STATIC_DESCRIPTOR = """\
id = "{module_id}"
value = 7
"""

MODULE_INSTANCE_DESCRIPTOR = """\
from autoloader import module


@module(id="{module_id}", lazy=True)
def build(context):
    return {{"built": "{module_id}"}}
"""
