"""In-memory module set used across the tests.

    example.com/r  (root)   imports example.com/a, example.com/c, fmt, C
                            test imports example.com/t, testing
                            xtest imports example.com/x
    example.com/a           imports example.com/b, os
    example.com/b           imports example.com/d
    example.com/c           imports example.com/d
    example.com/d           imports nothing
    example.com/t           imports example.com/tdep
    example.com/x           imports nothing
    example.com/tdep        imports nothing
    fmt, os, testing        standard library
"""

MODULES = {
    "example.com/r": {
        "dir": "/src/r",
        "imports": ["example.com/a", "example.com/c", "fmt", "C"],
        "test_imports": ["example.com/t", "testing"],
        "xtest_imports": ["example.com/x"],
        "go_files": ["r.go"],
        "cgo_files": ["r_cgo.go"],
        "test_go_files": ["r_test.go"],
        "xtest_go_files": ["r_x_test.go"],
    },
    "example.com/a": {
        "dir": "/src/a",
        "imports": ["example.com/b", "os"],
        "test_imports": ["example.com/t"],
        "go_files": ["a.go"],
        "test_go_files": ["a_test.go"],
    },
    "example.com/b": {"dir": "/src/b", "imports": ["example.com/d"], "go_files": ["b.go"]},
    "example.com/c": {"dir": "/src/c", "imports": ["example.com/d"], "go_files": ["c.go"]},
    "example.com/d": {"dir": "/src/d", "go_files": ["d.go"]},
    "example.com/t": {"dir": "/src/t", "imports": ["example.com/tdep"], "go_files": ["t.go"]},
    "example.com/x": {"dir": "/src/x", "go_files": ["x.go"]},
    "example.com/tdep": {"dir": "/src/tdep", "go_files": ["tdep.go"]},
    "fmt": {"dir": "/goroot/src/fmt", "imports": ["os"], "go_files": ["print.go"]},
    "os": {"dir": "/goroot/src/os", "go_files": ["file.go"]},
    "testing": {"dir": "/goroot/src/testing", "imports": ["fmt"], "go_files": ["testing.go"]},
}
