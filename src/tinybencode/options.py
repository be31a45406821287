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

MAX_STRING_LENGTH = 2**31 - 1


class _Options(object):
    defaults = {}

    def __init__(self, user_setup={}, **overrides):
        setup = dict(self.defaults)
        setup.update(user_setup)
        setup.update(overrides)
        unknown = sorted(set(setup) - set(self.defaults))
        if unknown:
            raise ValueError("unknown option(s): %s" % ", ".join(unknown))
        for key, value in setup.items():
            expected = type(self.defaults[key])
            if type(value) is not expected:
                raise ValueError(
                    "option %s must be %s, got %r" % (key, expected.__name__, value)
                )
            if expected is int and value < 0:
                raise ValueError("option %s cannot be less than zero" % key)
        self.__dict__.update(setup)

    @classmethod
    def coerce(cls, options):
        """Accept None (defaults), a setup dict or an instance of cls."""
        if options is None:
            return cls()
        if isinstance(options, dict):
            return cls(options)
        if isinstance(options, cls):
            return options
        raise TypeError(
            "expected %s or dict, got %s" % (cls.__name__, type(options).__name__)
        )

    def __setattr__(self, name, value):
        raise AttributeError("%s is read-only" % self.__class__.__name__)

    def as_dict(self):
        return {key: getattr(self, key) for key in self.defaults}

    def __eq__(self, other):
        return type(self) is type(other) and self.as_dict() == other.as_dict()

    def __hash__(self):
        return hash(tuple(sorted(self.as_dict().items())))

    def __repr__(self):
        return "%s(%s)" % (
            self.__class__.__name__,
            ", ".join("%s=%r" % item for item in self.as_dict().items()),
        )


class DecodeOptions(_Options):
    """
    max_stack_size: bound on parse-stack frames (open containers plus the
        values collected inside them); the document fails once exceeded
    allow_unwrapped_elements: accept a bare integer or byte string as the
        whole document; when off the top-level value must be a container
    allow_unordered_keys: accept dictionary keys that are not in ascending
        byte order (duplicates are still rejected)
    max_string_length: largest byte string length accepted
    """

    defaults = {
        "max_stack_size": 10000,
        "allow_unwrapped_elements": True,
        "allow_unordered_keys": False,
        "max_string_length": MAX_STRING_LENGTH,
    }


class EncodeOptions(_Options):
    """
    max_depth: bound on containers open at the same time while encoding
    detect_cycles: fail as soon as a container contains itself instead of
        waiting for max_depth to trip
    """

    defaults = {
        "max_depth": 10000,
        "detect_cycles": True,
    }
