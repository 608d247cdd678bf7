"""
Module resolvers: turn a module specifier into a ModuleDescriptor.

Two backends are provided:

- ``GoListResolver`` asks the go tool (``go list -json``) about packages on disk.
- ``IndexResolver`` answers from an in-memory module index, which can be
  loaded from a YAML or JSON file. It is useful for offline analysis of a
  previously captured module set and for tests.

Both also act as root expanders: ``expand()`` turns user arguments, which
may contain ``...`` wildcards, into concrete import paths.
"""

from __future__ import annotations

import json
import logging
import os
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

import yaml

from .errors import ConfigError, ResolutionError
from .pattern import has_wildcard, match_pattern

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ModuleDescriptor:
    import_path: str
    dir: str = ""
    imports: Tuple[str, ...] = ()
    test_imports: Tuple[str, ...] = ()
    xtest_imports: Tuple[str, ...] = ()
    go_files: Tuple[str, ...] = ()
    cgo_files: Tuple[str, ...] = ()
    test_go_files: Tuple[str, ...] = ()
    xtest_go_files: Tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], import_path: Optional[str] = None) -> "ModuleDescriptor":
        """Build a descriptor from a mapping.

        Accepts both snake_case keys (module index files) and the field
        names printed by ``go list -json``.
        """

        def seq(*keys: str) -> Tuple[str, ...]:
            for key in keys:
                value = data.get(key)
                if value is None:
                    continue
                if not isinstance(value, (list, tuple)):
                    raise TypeError(f"{key} must be a list, got {type(value).__name__}")
                if value:
                    return tuple(str(v) for v in value)
            return ()

        path = import_path or data.get("import_path") or data.get("ImportPath")
        if not path:
            raise ValueError("module descriptor has no import path")
        return cls(
            import_path=str(path),
            dir=str(data.get("dir") or data.get("Dir") or ""),
            imports=seq("imports", "Imports"),
            test_imports=seq("test_imports", "TestImports"),
            xtest_imports=seq("xtest_imports", "XTestImports"),
            go_files=seq("go_files", "GoFiles"),
            cgo_files=seq("cgo_files", "CgoFiles"),
            test_go_files=seq("test_go_files", "TestGoFiles"),
            xtest_go_files=seq("xtest_go_files", "XTestGoFiles"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "dir": self.dir,
            "imports": list(self.imports),
            "test_imports": list(self.test_imports),
            "xtest_imports": list(self.xtest_imports),
            "go_files": list(self.go_files),
            "cgo_files": list(self.cgo_files),
            "test_go_files": list(self.test_go_files),
            "xtest_go_files": list(self.xtest_go_files),
        }


class ModuleResolver:
    """Interface shared by the resolver backends."""

    def resolve(self, path: str, base_dir: str) -> ModuleDescriptor:
        raise NotImplementedError

    def expand(self, args: Sequence[str], base_dir: str) -> List[str]:
        raise NotImplementedError


def _is_local(path: str) -> bool:
    return path in (".", "..") or path.startswith(("./", "../")) or os.path.isabs(path)


class GoListResolver(ModuleResolver):
    """Resolve packages by running ``go list``."""

    def __init__(self, go_command: str = "go", env: Optional[Mapping[str, str]] = None):
        self.go_command = go_command
        self.env = dict(env) if env is not None else None

    def _run(self, args: List[str], base_dir: str) -> subprocess.CompletedProcess:
        cmd = [self.go_command] + args
        logger.debug("running %s in %s", " ".join(cmd), base_dir)
        try:
            return subprocess.run(
                cmd,
                cwd=base_dir,
                env=self.env,
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as e:
            raise ResolutionError(args[-1], f"cannot run {self.go_command}: {e}") from e

    def resolve(self, path: str, base_dir: str) -> ModuleDescriptor:
        proc = self._run(["list", "-e", "-json", path], base_dir)
        if proc.returncode != 0:
            raise ResolutionError(path, proc.stderr.strip() or f"go list exited with {proc.returncode}")
        try:
            data = json.loads(proc.stdout)
        except json.JSONDecodeError as e:
            raise ResolutionError(path, f"unreadable go list output: {e}") from e
        error = data.get("Error")
        if error:
            reason = error.get("Err") if isinstance(error, dict) else str(error)
            raise ResolutionError(path, reason or "not found")
        return ModuleDescriptor.from_dict(data)

    def expand(self, args: Sequence[str], base_dir: str) -> List[str]:
        if not args:
            return ["."]
        proc = self._run(["list"] + list(args), base_dir)
        if proc.returncode != 0:
            raise ResolutionError(" ".join(args), proc.stderr.strip() or f"go list exited with {proc.returncode}")
        return [line.strip() for line in proc.stdout.splitlines() if line.strip()]


class IndexResolver(ModuleResolver):
    """Resolve modules from an in-memory index keyed by import path."""

    def __init__(self, modules: Iterable[ModuleDescriptor]):
        self.modules: Dict[str, ModuleDescriptor] = {}
        for module in modules:
            self.modules[module.import_path] = module

    @classmethod
    def from_mapping(cls, index: Mapping[str, Mapping[str, Any]]) -> "IndexResolver":
        return cls(ModuleDescriptor.from_dict(fields or {}, import_path=path) for path, fields in index.items())

    def _find_by_dir(self, path: str, base_dir: str) -> Optional[ModuleDescriptor]:
        target = os.path.normpath(os.path.join(base_dir, path))
        for module in self.modules.values():
            if module.dir and os.path.normpath(module.dir) == target:
                return module
        return None

    def resolve(self, path: str, base_dir: str) -> ModuleDescriptor:
        module = self.modules.get(path)
        if module is None and _is_local(path):
            module = self._find_by_dir(path, base_dir)
        if module is None:
            raise ResolutionError(path, "not in module index")
        return module

    def expand(self, args: Sequence[str], base_dir: str) -> List[str]:
        if not args:
            return ["."]
        result: List[str] = []
        for arg in args:
            if not has_wildcard(arg):
                result.append(arg)
                continue
            if _is_local(arg):
                # ./... and friends name directories, not import paths
                matches = match_pattern(os.path.normpath(os.path.join(base_dir, arg)))
                found = sorted(
                    m.import_path for m in self.modules.values() if m.dir and matches(os.path.normpath(m.dir))
                )
            else:
                matches = match_pattern(arg)
                found = sorted(p for p in self.modules if matches(p))
            if not found:
                logger.warning('pattern "%s" matched no modules', arg)
            result.extend(found)
        return result


def load_module_index(path: str) -> IndexResolver:
    """Load an IndexResolver from a YAML or JSON file.

    The file holds a mapping from import path to descriptor fields
    (``dir``, ``imports``, ``test_imports``, ``xtest_imports``,
    ``go_files``, ``cgo_files``, ``test_go_files``, ``xtest_go_files``).
    """
    index_path = Path(path)
    if not index_path.exists():
        raise ConfigError(f"module index not found at {index_path}")
    text = index_path.read_text(encoding="utf-8")
    try:
        if index_path.suffix.lower() == ".json":
            data = json.loads(text)
        else:
            data = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ConfigError(f"cannot parse module index {index_path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"module index {index_path} must be a mapping of import path to module")
    try:
        resolver = IndexResolver.from_mapping(data)
    except (TypeError, ValueError, AttributeError) as e:
        raise ConfigError(f"invalid module index {index_path}: {e}") from e
    logger.info("Loaded %d module(s) from %s", len(resolver.modules), index_path)
    return resolver
