#!/usr/bin/env python
# -*- coding: utf-8 -*-

# Copyright (C) 2026 Modelon AB
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Lesser General Public License as published by
# the Free Software Foundation, version 3 of the License.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
# GNU Lesser General Public License for more details.
#
# You should have received a copy of the GNU Lesser General Public License
# along with this program. If not, see <http://www.gnu.org/licenses/>.
"""
Key-checked option dictionaries used to configure the model description
loader.
"""

class OptionBase(dict):
    """
    Base class for an options class.

    This class extends the dict class overriding __init__, __setitem__, update
    and setdefault with the purpose of offering a key check for the extending
    classes. The keys passed at construction time are the set of allowed
    keys; any other key is rejected.

    Example::

        class MyOptionsClass(OptionBase):
            def __init__(self, *args, **kw):
                mydefaults = {'def1':1, 'def2':2}
                super(MyOptionsClass,self).__init__(mydefaults)
                self.update(*args, **kw)

        >> opts = MyOptionsClass()
        >> opts['def1'] = 3   // ok
        >> opts.update({'def2':4})   // ok
        >> opts['def3']= 5   // not ok
    """

    def __init__(self, *args, **kw):
        super(OptionBase,self).__init__(*args, **kw)
        # save keys - these are now the set of allowed keys
        self._keys = list(super(OptionBase,self).keys())

    def __setitem__(self, key, value):
        if self._keys and not key in self._keys:
            raise UnrecognizedOptionError(
                "The key: %s, is not a valid option" %str(key))
        super(OptionBase,self).__setitem__(key, value)

    def update(self, *args, **kw):
        if args:
            if len(args) > 1:
                raise TypeError(
                    "update expected at most 1 arguments, got %d" % len(args))
            other = dict(args[0])
            for key in other:
                self[key] = other[key]
        for key in kw:
            self[key] = kw[key]

    def setdefault(self, key, value=None):
        if key not in self:
            self[key] = value
        return self[key]

class InvalidOptionsException(Exception):
    """
    Exception raised when an options argument is neither a dict nor an
    instance of the expected options class.
    """
    def __init__(self, arg):
        self.msg='Invalid options object: '+str(arg)

    def __str__(self):
        return repr(self.msg)

class UnrecognizedOptionError(Exception): pass
