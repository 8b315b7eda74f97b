"""
Guardian -- Password Strength Meter & Secure Secret Generator
==============================================================

Generates passwords and passphrases from the operating system's secure
random source and estimates the strength of arbitrary secrets with a
transparent entropy heuristic and ordered remediation advice.

Modules:
    - guardian.core.engine: Engine facade wiring generators and analyzers
    - guardian.core.dispatch: Loosely typed request boundary
    - guardian.core.models: Pydantic data models
    - guardian.generators: Secure random source, pools and composers
    - guardian.analyzers: Strength estimation, advice, uniformity audit
    - guardian.data: Bundled word list and reference secret set
    - guardian.output: Console and report output
    - guardian.cli: Click-based command-line interface

References:
    - NIST SP 800-63B (2017). Digital Identity Guidelines.
    - Knuth, D. E. (1997). The Art of Computer Programming, Vol. 2.
"""

__version__ = "1.0.0"
__tool_name__ = "guardian"
