from minpq.utils.logger import ContextAdapter
