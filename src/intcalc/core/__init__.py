"""
intcalc core: syntax model, diagnostics, errors and the language pipeline.
"""
