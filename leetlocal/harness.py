"""Wrapper programs that embed a solution file and drive it with test input.

Each builder returns the full text of a program that reads the test input
from *input_path*, prints ``Input: ...`` and then ``Output: ...``. Only the
Python and JavaScript harnesses actually call the solution; the compiled
languages print a placeholder output because binding parsed arguments to a
typed method signature is left to the user.
"""

from __future__ import annotations

import json
from pathlib import Path
from string import Template

JAVA_MAIN_CLASS = "LeetCodeTest"

PYTHON_BOOTSTRAP = (
    "import builtins, runpy, sys, typing\n"
    "builtins.__dict__.update({n: getattr(typing, n) for n in typing.__all__})\n"
    "runpy.run_path(sys.argv[1], run_name='__main__')\n"
)

_PYTHON_TEMPLATE = Template('''\
$source


# Test runner
if __name__ == "__main__":
    import json as _json
    import sys as _sys

    with open($input_path, "r", encoding="utf-8") as _f:
        _test_input = _f.read().strip()

    print("Input:", _test_input)

    def _parse_args(text):
        if not text:
            return [text]
        try:
            value = _json.loads(text)
        except ValueError:
            pass
        else:
            return value if isinstance(value, list) else [value]
        try:
            return _json.loads("[" + text + "]")
        except ValueError:
            pass
        lines = [line for line in text.splitlines() if line.strip()]
        if len(lines) > 1:
            try:
                return [_json.loads(line) for line in lines]
            except ValueError:
                pass
        return [text]

    _args = _parse_args(_test_input)

    if "Solution" not in globals():
        print("Error: No Solution class found", file=_sys.stderr)
        _sys.exit(1)

    # First public method in definition order
    _methods = [
        _name
        for _name, _member in vars(Solution).items()
        if not _name.startswith("_") and callable(_member)
    ]
    if not _methods:
        print("Error: No public methods found in Solution class", file=_sys.stderr)
        _sys.exit(1)

    _method = getattr(Solution(), _methods[0])
    _result = _method(*_args)
    print("Output:", _result)
''')

_JAVASCRIPT_TEMPLATE = Template('''\
const __fs = require('fs');

$source

// Test runner
const __testInput = __fs.readFileSync($input_path, 'utf-8').trim();
console.log("Input:", __testInput);

function __parseArgs(text) {
    if (!text) {
        return [text];
    }
    try {
        const value = JSON.parse(text);
        return Array.isArray(value) ? value : [value];
    } catch (e) {}
    try {
        return JSON.parse("[" + text + "]");
    } catch (e) {}
    const lines = text.split(/\\r?\\n/).filter(line => line.trim());
    if (lines.length > 1) {
        try {
            return lines.map(line => JSON.parse(line));
        } catch (e) {}
    }
    return [text];
}

const __args = __parseArgs(__testInput);

let __result;
if (typeof Solution !== 'undefined') {
    const __solution = new Solution();
    const __methodName = Object.getOwnPropertyNames(Solution.prototype).find(m => m !== 'constructor');
    if (!__methodName) {
        console.error("Error: No public methods found in Solution class");
        process.exit(1);
    }
    __result = __solution[__methodName](...__args);
} else {
    __result = __args[0];
}

console.log("Output:", __result);
''')

_JAVA_TEMPLATE = Template('''\
import java.io.*;
import java.nio.charset.StandardCharsets;
import java.nio.file.*;
import java.util.*;

$source

class $main_class {
    public static void main(String[] args) throws IOException {
        String testInput = new String(Files.readAllBytes(Paths.get($input_path)), StandardCharsets.UTF_8);
        System.out.println("Input: " + testInput);

        System.out.println("Output: [Java execution requires manual setup]");
    }
}
''')

_CPP_TEMPLATE = Template('''\
#include <algorithm>
#include <fstream>
#include <iostream>
#include <map>
#include <queue>
#include <set>
#include <sstream>
#include <stack>
#include <string>
#include <unordered_map>
#include <unordered_set>
#include <vector>
using namespace std;

$source

int main() {
    ifstream infile($input_path);
    stringstream buffer;
    buffer << infile.rdbuf();
    infile.close();
    string testInput = buffer.str();

    cout << "Input: " << testInput << endl;

    cout << "Output: [C++ execution requires manual setup]" << endl;
    return 0;
}
''')

_GO_TEMPLATE = Template('''\
package main

import (
    "fmt"
    "os"
)

$source

func main() {
    data, _ := os.ReadFile($input_path)
    testInput := string(data)
    fmt.Println("Input:", testInput)

    fmt.Println("Output: [Go execution requires manual setup]")
}
''')


def _string_literal(path: Path) -> str:
    """Double-quoted literal valid in JavaScript, Java, C++ and Go."""
    return json.dumps(str(path))


def build_python_harness(source: str, input_path: Path) -> str:
    return _PYTHON_TEMPLATE.substitute(source=source, input_path=repr(str(input_path)))


def python_bootstrap_args(script: Path) -> list[str]:
    """Interpreter arguments that run *script* with ``typing`` names preloaded.

    LeetCode solutions use ``List[int]`` and friends without importing them.
    The names go into builtins before the script starts, so nothing has to
    precede the solution text (a leading ``from __future__`` import stays valid).
    """
    return ["-c", PYTHON_BOOTSTRAP, str(script)]


def build_javascript_harness(source: str, input_path: Path) -> str:
    return _JAVASCRIPT_TEMPLATE.substitute(
        source=source, input_path=_string_literal(input_path)
    )


def build_java_harness(source: str, input_path: Path) -> str:
    """Java harness; the entry point is always ``LeetCodeTest.main``."""
    return _JAVA_TEMPLATE.substitute(
        source=source,
        input_path=_string_literal(input_path),
        main_class=JAVA_MAIN_CLASS,
    )


def build_cpp_harness(source: str, input_path: Path) -> str:
    return _CPP_TEMPLATE.substitute(source=source, input_path=_string_literal(input_path))


def build_go_harness(source: str, input_path: Path) -> str:
    return _GO_TEMPLATE.substitute(source=source, input_path=_string_literal(input_path))
