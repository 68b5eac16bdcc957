"""宿主测试框架 - 所有断言最终委托给 unittest.TestCase 的断言 API"""

import unittest

# TestCase 的断言方法不保存状态，全局共用一个实例即可
host = unittest.TestCase()
host.maxDiff = None

failure_exception = host.failureException
