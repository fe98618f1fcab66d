"""
Automatic title generation layer.

Includes the status policy and bundle configuration cache, sanitization,
the evaluator capability, the per-pass application guard and the
TitleGenerationEngine that ties them together. Nothing in here knows
about Django models; hosts plug in through the ports in ``ports``.
"""
