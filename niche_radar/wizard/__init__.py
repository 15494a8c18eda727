"""
Interactive questionnaire.

Modules
-------
steps   : STEPS question catalogue (category, prompt, options).
session : WizardSession step machine — start(), select(), reset().
"""
