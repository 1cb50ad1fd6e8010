"""
Copyright (c) 2009 Satoshi Nakamoto
Distributed under the MIT/X11 software license

Utility functions - error reporting for the check_* predicates
"""


def error(where: str, reason) -> bool:
    """
    Report why a check failed and return False

    Prints "ERROR: <where> : <reason>" so predicates can end with
    ``return error("check_hex()", e)``.

    Args:
        where: Name of the failing check, e.g. "check_hex()"
        reason: Exception or message describing the failure

    Returns:
        Always returns False
    """
    print(f"ERROR: {where} : {reason}")
    return False
