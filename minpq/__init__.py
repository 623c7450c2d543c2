from minpq.utils.indexedheap import IndexedPriorityQueue
from minpq.utils.exceptions import PriorityQueueException, DuplicateElementException,\
                                   ElementNotFoundException, EmptyQueueException,\
                                   NegativePriorityException, HeapCorruptedException
