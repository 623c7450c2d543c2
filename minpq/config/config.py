'''
Created on 2021/9/27

:author: hubo
'''
import re
import ast

class ConfigTree(object):
    """
    A config node supporting both attribute access and dotted dict-like keys::

        node['queue.checkinvariants'] = True
        node.queue.checkinvariants  # True
    """
    def __init__(self):
        pass
    def items(self):
        return self.__dict__.items()
    def __iter__(self):
        return iter(self.__dict__)
    def config_items(self, sortkey = False):
        """
        Return `(key, value)` tuples for configurations in this node and all sub nodes,
        with dotted keys relative to this node.
        """
        items = sorted(self.items()) if sortkey else self.items()
        for k,v in items:
            if isinstance(v, ConfigTree):
                for k2,v2 in v.config_items(sortkey):
                    yield (k + '.' + k2, v2)
            else:
                yield (k,v)
    def config_keys(self, sortkey = False):
        return (k for k,_ in self.config_items(sortkey))
    def _getsubitem(self, key, create = False):
        keylist = [k for k in key.split('.') if k != '']
        if not keylist:
            raise KeyError('Config key is empty')
        current = self
        for k in keylist[:-1]:
            v = getattr(current, k, None)
            if not isinstance(v, ConfigTree):
                if not create:
                    return (None, None)
                v = ConfigTree()
                setattr(current, k, v)
            current = v
        return (current, keylist[-1])
    def __setitem__(self, key, value):
        (t, k) = self._getsubitem(key, True)
        setattr(t, k, value)
    def __getitem__(self, key):
        (t, k) = self._getsubitem(key, False)
        if t is None:
            raise KeyError(key)
        return t.__dict__[k]
    def __delitem__(self, key):
        (t, k) = self._getsubitem(key, False)
        if t is None:
            raise KeyError(key)
        delattr(t, k)
    def __contains__(self, key):
        (t, k) = self._getsubitem(key, False)
        return t is not None and k in t.__dict__
    def get(self, key, defaultvalue = None):
        (t, k) = self._getsubitem(key, False)
        if t is None:
            return defaultvalue
        return t.__dict__.get(k, defaultvalue)
    def clear(self):
        self.__dict__.clear()
    def todict(self):
        """
        Convert this node to a dictionary tree.
        """
        return dict((k, v.todict() if isinstance(v, ConfigTree) else v)
                    for k,v in self.items())

class Manager(ConfigTree):
    '''
    Configuration manager. Use the global variable `manager` to access the configuration system.
    '''
    _line_format = re.compile(r'((?:[a-zA-Z][a-zA-Z0-9_]*\.)*[a-zA-Z][a-zA-Z0-9_]*)\s*=\s*')
    _space = re.compile(r'\s')
    def _storeline(self, key, lineno, lines):
        text = ''.join(lines)
        try:
            value = ast.literal_eval(text)
        except (ValueError, SyntaxError) as exc:
            raise ValueError('Error format in line %d(%s: %s):\n%s' % (lineno, type(exc).__name__, exc, text))
        self[key] = value
    def loadfromfile(self, filelike):
        """
        Read `key = <python literal>` lines from a file-like object or a sequence of strings.
        Lines starting with `#` are skipped; a line starting with whitespace continues
        the previous value. Existing values are kept unless overwritten.
        """
        line_buffer = []
        line_key = None
        key_line_no = None
        for line_no, l in enumerate(filelike, 1):
            ls = l.strip()
            if not ls or ls.startswith('#'):
                continue
            if self._space.match(l):
                if not line_key:
                    raise ValueError('Error format in line %d: first line cannot start with space\n%s' % (line_no, l))
                line_buffer.append(l)
                continue
            if line_key:
                self._storeline(line_key, key_line_no, line_buffer)
            m = self._line_format.match(l)
            if not m:
                raise ValueError('Error format in line %d:\n%s' % (line_no, l))
            line_key = m.group(1)
            key_line_no = line_no
            line_buffer = [l[m.end():]]
        if line_key:
            self._storeline(line_key, key_line_no, line_buffer)
    def loadfrom(self, path):
        """
        Read configurations from path
        """
        with open(path, 'r') as f:
            self.loadfromfile(f)
    def loadfromstr(self, string):
        """
        Read configurations from string
        """
        self.loadfromfile(string.splitlines(True))
    def save(self, sortkey = True):
        """
        Save configurations to a list of strings
        """
        return [k + '=' + repr(v) for k,v in self.config_items(sortkey)]
    def savetostr(self, sortkey = True):
        return ''.join(l + '\n' for l in self.save(sortkey))

# Global configuration manager
manager = Manager()

class Configurable(object):
    """
    Base class for a configurable object. An attribute that is not set on the instance
    or class is looked up, in order, from:

    1. `manager[cls.configkey + '.' + attrname]`, walking up configurable parent classes

    2. `_default_<attrname>` defined on the class or a configurable parent class

    Attributes beginning with '_' are not mapped.
    """
    def __getattr__(self, key):
        if key.startswith('_'):
            raise AttributeError("type object '%s' has no attribute '%s'" % (type(self).__name__, key))
        cls = type(self)
        while cls is not None:
            configkey = cls.__dict__.get('configkey')
            if configkey is not None:
                try:
                    return manager[configkey + '.' + key]
                except KeyError:
                    pass
            try:
                return cls.__dict__['_default_' + key]
            except KeyError:
                pass
            cls = cls.getConfigurableParent()
        raise AttributeError("type object '%s' has no attribute '%s'" % (type(self).__name__, key))
    @classmethod
    def getConfigurableParent(cls):
        """
        Return the parent from which this class inherits configurations
        """
        for p in cls.__bases__:
            if issubclass(p, Configurable) and p is not Configurable:
                return p
        return None

def defaultconfig(cls):
    """
    Map the class to `<lowercase-name>.default`, or to `<parentbase>.<lowercase-name>`
    when a configurable parent defines `configbase`.
    """
    parent = cls.getConfigurableParent()
    parentbase = getattr(parent, 'configbase', None) if parent is not None else None
    if parentbase is None:
        base = cls.__name__.lower()
        cls.configbase = base
        cls.configkey = base + '.default'
    else:
        cls.configkey = parentbase + '.' + cls.__name__.lower()
    return cls
