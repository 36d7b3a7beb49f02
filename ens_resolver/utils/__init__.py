import time

from ens_resolver.utils.typing import Milliseconds


def now_ms() -> Milliseconds:
    """ Current wall clock time in milliseconds """
    return Milliseconds(int(time.time() * 1000))
