"""Testing – doubles for code that logs through mp_diagnostics."""
