from minpq.config.config import ConfigTree, Manager, manager, Configurable, defaultconfig
