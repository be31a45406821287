"""
The MIT License

Copyright (c) 2015 Fred Stober

Permission is hereby granted, free of charge, to any person obtaining a copy
of this software and associated documentation files (the "Software"), to deal
in the Software without restriction, including without limitation the rights
to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
copies of the Software, and to permit persons to whom the Software is
furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in
all copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN
THE SOFTWARE.
"""

import threading
import time

from ..errors import BCancelledError


def start_thread(fun, *args, **kwargs):
    thread = threading.Thread(name=repr(fun), target=fun, args=args, kwargs=kwargs)
    thread.daemon = True
    thread.start()
    return thread


class CancelToken(object):
    """Shared cancellation flag checked by the encoder and decoder.

    One token may be handed to several concurrent calls; cancelling it aborts
    all of them at their next check.
    """

    def __init__(self):
        self._event = threading.Event()
        self._time = None

    def cancel(self):
        if not self._event.is_set():
            self._time = time.time()
        self._event.set()

    def is_set(self):
        return self._event.is_set()

    is_cancelled = is_set

    def get_age(self):
        """Seconds since the token was cancelled, None while it is still live."""
        if self._time is None:
            return None
        return time.time() - self._time

    def wait(self, timeout=None):
        return self._event.wait(timeout)

    def raise_if_cancelled(self):
        if self._event.is_set():
            raise BCancelledError("operation cancelled")

    def cancel_after(self, seconds):
        def _delayed_cancel():
            if not self._event.wait(seconds):
                self.cancel()

        return start_thread(_delayed_cancel)


def check_cancelled(cancel):
    """Raise BCancelledError if `cancel` (anything with is_set()) is set."""
    if cancel is not None and cancel.is_set():
        raise BCancelledError("operation cancelled")
