'''
Created on 2021/9/27

:author: hubo
'''
from logging import getLogger
from minpq.config import Configurable, defaultconfig
from minpq.utils.logger import ContextAdapter
from minpq.utils.exceptions import DuplicateElementException, ElementNotFoundException,\
                                   EmptyQueueException, NegativePriorityException,\
                                   HeapCorruptedException

@defaultconfig
class IndexedPriorityQueue(Configurable):
    '''
    A min priority queue of unique elements, with an index from each element to its
    position in the heap, so priorities can be changed by element.

    The heap is a list of `(priority, element)` tuples stored as a complete binary tree:
    the children of position `i` are `2i+1` and `2i+2`. Elements must be hashable and
    priorities totally ordered; priorities may repeat. The smallest priority is at the top.

    The queue is not internally synchronized. Mutating methods (push, pop, remove,
    changePriority, clear) need exclusive access; readers must not run while a
    mutation is in progress.
    '''
    # Reject negative priorities. Disable to use priorities that cannot be compared with 0.
    _default_nonnegative = True
    # Run verify() after every mutation. Slow, for debugging only.
    _default_checkinvariants = False
    # Log every mutation with DEBUG level
    _default_debugging = False
    logger = getLogger(__name__ + '.IndexedPriorityQueue')
    def __init__(self, name = None, nonnegative = None, checkinvariants = None, debugging = None):
        '''
        Constructor

        :param name: optional name, used as the logging context

        :param nonnegative: override the `nonnegative` configuration

        :param checkinvariants: override the `checkinvariants` configuration

        :param debugging: override the `debugging` configuration
        '''
        self.name = name
        if nonnegative is not None:
            self.nonnegative = nonnegative
        if checkinvariants is not None:
            self.checkinvariants = checkinvariants
        if debugging is not None:
            self.debugging = debugging
        self.logger = ContextAdapter(IndexedPriorityQueue.logger, {'context': name})
        self.heap = []
        self.index = {}
    def _checkpriority(self, priority):
        # NaN is rejected too
        if self.nonnegative and not priority >= 0:
            raise NegativePriorityException(priority)
    def _mutated(self, op, *args):
        if self.debugging:
            self.logger.debug('%s%r, size = %d', op, args, len(self.heap))
        if self.checkinvariants:
            self.verify()
    def push(self, priority, element):
        '''
        Add an element with the given priority

        The priority must be comparable with the priorities already queued. An
        incomparable priority (such as None next to integers) raises TypeError from the
        comparison, after the node is appended; the queue must not be used afterwards.

        :raises DuplicateElementException: the element is already in the queue

        :raises NegativePriorityException: the priority is negative
        '''
        if element in self.index:
            raise DuplicateElementException(element)
        self._checkpriority(priority)
        pos = len(self.heap)
        self.heap.append((priority, element))
        self.index[element] = pos
        self._percolateup(pos)
        self._mutated('push', priority, element)
    def pop(self):
        '''
        Remove the element with the minimum priority and return it

        :raises EmptyQueueException: the queue is empty
        '''
        if not self.heap:
            raise EmptyQueueException('pop from an empty queue')
        self._swap(0, len(self.heap) - 1)
        ret = self.heap.pop()
        del self.index[ret[1]]
        if self.heap:
            self._pushdown(0)
        self._mutated('pop', ret[0], ret[1])
        return ret[1]
    def remove(self, element):
        '''
        Remove an element from any position

        :raises ElementNotFoundException: the element is not in the queue
        '''
        if element not in self.index:
            raise ElementNotFoundException(element)
        pos = self.index[element]
        self._swap(pos, len(self.heap) - 1)
        ret = self.heap.pop()
        del self.index[element]
        if pos < len(self.heap):
            self._pushdown(pos)
            self._percolateup(pos)
        self._mutated('remove', ret[0], element)
    def changePriority(self, newpriority, element):
        '''
        Change the priority of an element already in the queue. The priority may
        increase or decrease.

        :raises ElementNotFoundException: the element is not in the queue

        :raises NegativePriorityException: the new priority is negative
        '''
        if element not in self.index:
            raise ElementNotFoundException(element)
        pos = self.index[element]
        self._checkpriority(newpriority)
        self.heap[pos] = (newpriority, element)
        # At most one of the two moves the node
        pos = self._pushdown(pos)
        self._percolateup(pos)
        self._mutated('changePriority', newpriority, element)
    def getPriority(self, element):
        if element not in self.index:
            raise ElementNotFoundException(element)
        return self.heap[self.index[element]][0]
    def topPriority(self):
        if not self.heap:
            raise EmptyQueueException()
        return self.heap[0][0]
    def topElement(self):
        if not self.heap:
            raise EmptyQueueException()
        return self.heap[0][1]
    def isPresent(self, element):
        return element in self.index
    def isEmpty(self):
        return not self.heap
    def size(self):
        return len(self.heap)
    def clear(self):
        self.index.clear()
        del self.heap[:]
        self._mutated('clear')
    def verify(self):
        '''
        Check the shape, heap order and index invariants.

        :raises HeapCorruptedException: describes the first violation found
        '''
        heap = self.heap
        if len(self.index) != len(heap):
            raise HeapCorruptedException(None, 'Index has %d entries for %d nodes' % (len(self.index), len(heap)))
        for i, (priority, element) in enumerate(heap):
            if self.index.get(element) != i:
                raise HeapCorruptedException(i, 'Element %r at %d is indexed at %r' % (element, i, self.index.get(element)))
            if i > 0 and heap[self._parent(i)][0] > priority:
                raise HeapCorruptedException(i, 'Priority %r at %d is smaller than its parent %r' %
                                                (priority, i, heap[self._parent(i)][0]))
    def dump(self):
        '''
        Return the heap and the index as text, and log it with DEBUG level
        '''
        ret = 'Heap: (priority, element): %s\nIndex: (element: position): %s' % \
                (', '.join('(%r,%r)' % n for n in self.heap),
                 ', '.join('(%r:%r)' % (e, i) for e, i in self.index.items()))
        self.logger.debug('%s', ret)
        return ret
    def _swap(self, i, j):
        # The only place that moves an existing node
        ni = self.heap[i]
        nj = self.heap[j]
        self.heap[i] = nj
        self.heap[j] = ni
        self.index[ni[1]] = j
        self.index[nj[1]] = i
    @staticmethod
    def _left(pos):
        return pos * 2 + 1
    @staticmethod
    def _right(pos):
        return pos * 2 + 2
    @staticmethod
    def _parent(pos):
        return (pos - 1) // 2
    def _isleaf(self, pos):
        return self._left(pos) >= len(self.heap)
    def _hastwochildren(self, pos):
        return self._right(pos) < len(self.heap)
    def _percolateup(self, pos):
        heap = self.heap
        while pos > 0:
            pindex = self._parent(pos)
            if heap[pindex][0] > heap[pos][0]:
                self._swap(pindex, pos)
                pos = pindex
            else:
                break
        return pos
    def _pushdown(self, pos):
        heap = self.heap
        while not self._isleaf(pos):
            cindex = self._left(pos)
            # Left child wins a tie
            if self._hastwochildren(pos) and heap[self._right(pos)][0] < heap[cindex][0]:
                cindex = self._right(pos)
            if heap[cindex][0] < heap[pos][0]:
                self._swap(pos, cindex)
                pos = cindex
            else:
                break
        return pos
    def __len__(self):
        return len(self.heap)
    def __bool__(self):
        return bool(self.heap)
    def __contains__(self, element):
        return element in self.index
