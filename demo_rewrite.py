#!/usr/bin/env python3
"""
Demo: Rewrite the lodash imports of a sample module.

Shows every import shape the rewriter recognizes, including the ones it
must leave alone.
"""

import warnings

from lodash_swap import es_toolkit_plugin


SAMPLE = """import _ from 'lodash';
import { isEqual, every as all } from 'lodash-es';
import {
  debounce,
  throttle as slow,
} from 'lodash';
import clone from 'lodash/clone.js';
import lodashGet from 'lodash.get';
import pad from 'lodash.every';

_.isFunction(clone);
_.map([1, 2, 3], String);
"""


def main():
    plugin = es_toolkit_plugin()

    print("=" * 80)
    print("IMPORT REWRITE DEMO")
    print("=" * 80)

    print("\nINPUT:")
    print("-" * 80)
    print(SAMPLE)

    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        result = plugin.transform(SAMPLE, "sample.ts")

    print("OUTPUT:")
    print("-" * 80)
    print(result.code)

    print("DIAGNOSTICS:")
    print("-" * 80)
    for w in caught:
        print(f"  {w.category.__name__}: {w.message}")
    print("=" * 80)


if __name__ == "__main__":
    main()
