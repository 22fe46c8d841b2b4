"""Member groups module.

HTTP API over two backing stores that describe the same groups: the identity
role store and the legacy member group service. ``repository`` reconciles
them, ``service`` implements the operations and ``controllers`` exposes them.
"""
