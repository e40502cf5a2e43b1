"""Pytest plumbing: expand testscenarios scenarios into separate test classes.

pytest does not honour testscenarios' run-time scenario multiplication, so
each scenario is collected as its own subclass with the scenario's
attributes applied, mirroring testscenarios.apply_scenario.
"""

import inspect

import testscenarios
from _pytest.unittest import UnitTestCase


def pytest_pycollect_makeitem(collector, name, obj):
    if not (inspect.isclass(obj)
            and issubclass(obj, testscenarios.TestWithScenarios)
            and getattr(obj, 'scenarios', None)):
        return None
    items = []
    for scenario_name, params in obj.scenarios:
        attrs = dict(params)
        attrs['scenarios'] = None
        attrs['__module__'] = obj.__module__
        sub = type(obj.__name__, (obj,), attrs)
        item = UnitTestCase.from_parent(
            collector, name="%s[%s]" % (name, scenario_name))
        item._obj = sub
        items.append(item)
    return items
