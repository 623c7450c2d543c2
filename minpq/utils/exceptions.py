'''
Created on 2021/9/27

:author: hubo
'''
class PriorityQueueException(Exception):
    pass


class DuplicateElementException(PriorityQueueException, KeyError):
    def __init__(self, element, desc = "Element is already in the queue"):
        PriorityQueueException.__init__(self, desc)
        self.element = element
    def __str__(self):
        return self.args[0]


class ElementNotFoundException(PriorityQueueException, KeyError):
    def __init__(self, element, desc = "Element is not in the queue"):
        PriorityQueueException.__init__(self, desc)
        self.element = element
    def __str__(self):
        return self.args[0]


class EmptyQueueException(PriorityQueueException, IndexError):
    def __init__(self, desc = "Queue is empty"):
        PriorityQueueException.__init__(self, desc)


class NegativePriorityException(PriorityQueueException, ValueError):
    def __init__(self, priority, desc = "Priority cannot be negative"):
        PriorityQueueException.__init__(self, desc)
        self.priority = priority


class HeapCorruptedException(PriorityQueueException):
    def __init__(self, position, desc = "Heap invariant violated"):
        PriorityQueueException.__init__(self, desc)
        self.position = position
