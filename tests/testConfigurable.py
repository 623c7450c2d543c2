'''
Created on 2021/9/27

@author: hubo
'''
import unittest
import os
import shutil
import tempfile
from minpq.config import manager, Configurable, defaultconfig
from minpq import IndexedPriorityQueue

@defaultconfig
class TestConfigurable(Configurable):
    _default_testproperty = '123'

@defaultconfig
class TestSubClass(TestConfigurable):
    _default_testproperty = '456'
    testproperty2 = 123


class Test(unittest.TestCase):

    def setUp(self):
        manager.clear()

    def tearDown(self):
        manager.clear()

    def testConfigurable(self):
        c1 = TestConfigurable()
        c2 = TestSubClass()
        self.assertEqual(getattr(c1, 'test', 'notconfigured'), 'notconfigured')
        manager['testconfigurable.default.test'] = 789
        self.assertEqual(getattr(c1, 'test', 'notconfigured'), 789)
        self.assertEqual(getattr(c2, 'test', 'notconfigured'), 789)
        manager['testconfigurable.testsubclass.test'] = 456
        self.assertEqual(c1.test, 789)
        self.assertEqual(c2.test, 456)
        self.assertEqual(c1.testproperty, '123')
        self.assertEqual(c2.testproperty, '456')
        manager['testconfigurable.default.testproperty2'] = 321
        self.assertEqual(c1.testproperty2, 321)
        self.assertEqual(c2.testproperty2, 123)
        c1.testproperty = 777
        self.assertEqual(c1.testproperty, 777)
        self.assertRaises(AttributeError, getattr, c1, '_hidden')
        self.assertEqual(manager.testconfigurable.testsubclass.test, 456)
        self.assertEqual(manager.testconfigurable['default.test'], 789)
        self.assertEqual(set(manager.testconfigurable), set(['default', 'testsubclass']))

    def testQueueDefaults(self):
        heap = IndexedPriorityQueue()
        self.assertTrue(heap.nonnegative)
        self.assertFalse(heap.checkinvariants)
        self.assertFalse(heap.debugging)

    def testQueueFromConfig(self):
        manager['indexedpriorityqueue.default.nonnegative'] = False
        heap = IndexedPriorityQueue()
        heap.push(-3, 'a')
        self.assertEqual(heap.topPriority(), -3)
        # Constructor arguments take precedence
        heap2 = IndexedPriorityQueue(nonnegative=True)
        self.assertTrue(heap2.nonnegative)
        del manager['indexedpriorityqueue.default.nonnegative']
        self.assertTrue(heap.nonnegative)

    def testLoadFromStr(self):
        manager.loadfromstr('''# queue settings
indexedpriorityqueue.default.checkinvariants = True

indexedpriorityqueue.default.debugging = False
testa.testb.values = [1,
    2, (3, "abc")]
testa.testc = {'abc': 123}
''')
        self.assertIs(manager['indexedpriorityqueue.default.checkinvariants'], True)
        self.assertEqual(manager['testa.testb.values'], [1, 2, (3, "abc")])
        self.assertEqual(manager.testa.testc, {'abc': 123})
        self.assertTrue(IndexedPriorityQueue().checkinvariants)
        self.assertEqual(list(manager.config_keys(True)), ['indexedpriorityqueue.default.checkinvariants',
                                                           'indexedpriorityqueue.default.debugging',
                                                           'testa.testb.values',
                                                           'testa.testc'])
        save = manager.save()
        text = manager.savetostr()
        manager.clear()
        manager.loadfromstr(text)
        self.assertEqual(manager.save(), save)
        self.assertEqual(manager.todict()['testa'], {'testb': {'values': [1, 2, (3, "abc")]},
                                                     'testc': {'abc': 123}})

    def testConfigFile(self):
        manager['testa.testb.test1'] = 123
        manager['testa.testb.test2'] = "abc"
        manager['testa.testb.test3.test4'] = (123,"abc")
        manager['testa.testb.test3.test5'] = {'abc':123,b'def':u'ghi','jkl':[(123.12,345),"abc"]}
        save = manager.save()
        tmpdir = tempfile.mkdtemp()
        try:
            path = os.path.join(tmpdir, 'testconfig.cfg')
            with open(path, 'w') as f:
                f.write(manager.savetostr())
            manager.clear()
            self.assertNotIn('testa.testb.test1', manager)
            manager.loadfrom(path)
        finally:
            shutil.rmtree(tmpdir)
        self.assertEqual(manager.save(), save)
        self.assertEqual(manager['testa.testb.test3.test4'], (123,"abc"))
        self.assertEqual(manager.get('testa.testb.test2'), "abc")
        self.assertEqual(manager.get('testa.testb.missing', 'notconfigured'), 'notconfigured')
        self.assertIsNone(manager.get('testx.testy'))

    def testLoadErrors(self):
        self.assertRaises(ValueError, manager.loadfromstr, '    a = 1\n')
        self.assertRaises(ValueError, manager.loadfromstr, '1a = 1\n')
        self.assertRaises(ValueError, manager.loadfromstr, 'a = [1,\n')
        self.assertNotIn('a', manager)

if __name__ == "__main__":
    #import sys;sys.argv = ['', 'Test.testName']
    unittest.main()
