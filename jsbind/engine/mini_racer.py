"""V8-backed engine using the mini-racer bindings."""

from __future__ import annotations

import json
import re
from typing import Any, Dict, List

from py_mini_racer import MiniRacer
from py_mini_racer._exc import MiniRacerBaseException

from .base import EngineError, JSValue, ObjectRef, ScriptEngine

_NAME_PATTERN = re.compile(r"^[A-Za-z_$][\w$]*(\.[A-Za-z_$][\w$]*)*$")

# Objects are pinned in a handle table so that identity survives across calls
# and the classifier can detect revisits.
_INTROSPECTION_SOURCE = r"""
var __jsbind = (function () {
  var handles = [];
  var ids = new Map();

  function pin(obj) {
    if (!ids.has(obj)) {
      ids.set(obj, handles.length);
      handles.push(obj);
    }
    return ids.get(obj);
  }

  function describe(v) {
    if (v === null) return {kind: "null"};
    var t = typeof v;
    if (t === "undefined") return {kind: "undefined"};
    if (t === "string" || t === "boolean") return {kind: t, value: v};
    if (t === "number") return {kind: "number", value: isFinite(v) ? v : null};
    if (t === "function") return {kind: "function", ref: pin(v), className: "Function"};
    if (t !== "object") return {kind: "other", className: t};
    var cls = Object.prototype.toString.call(v).slice(8, -1);
    var arrayLike = Array.isArray(v) ||
      (ArrayBuffer.isView(v) && !(v instanceof DataView));
    return {kind: arrayLike ? "array" : "object", ref: pin(v), className: cls};
  }

  return {
    lookup: function (name) {
      return JSON.stringify(describe((0, eval)(name)));
    },
    keys: function (h) {
      return JSON.stringify(Object.keys(handles[h]));
    },
    get: function (h, key) {
      return JSON.stringify(describe(handles[h][key]));
    },
    source: function (h) {
      return String(Function.prototype.toString.call(handles[h]));
    }
  };
})();
"""


class MiniRacerEngine(ScriptEngine):
    """Runs library source in an embedded V8 isolate."""

    def __init__(self, context: MiniRacer | None = None) -> None:
        super().__init__()
        self._ctx = context or MiniRacer()
        self._eval(_INTROSPECTION_SOURCE, "<introspection>")

    def run(self, source: str, *, filename: str = "<script>") -> None:
        self._eval(source, filename)

    def lookup(self, name: str) -> ObjectRef:
        if not _NAME_PATTERN.match(name):
            raise EngineError(f"Invalid object name {name!r}")
        value = self._describe(self._call("lookup", json.dumps(name)))
        if value.ref is None:
            raise EngineError(f"{name!r} is not an object (found {value.kind})")
        return value.ref

    def keys(self, ref: ObjectRef) -> List[str]:
        keys = json.loads(self._call("keys", str(ref.handle)))
        return [str(key) for key in keys]

    def get(self, ref: ObjectRef, key: str) -> JSValue:
        return self._describe(self._call("get", str(ref.handle), json.dumps(key)))

    def source_text(self, value: JSValue) -> str:
        if not value.is_function() or value.ref is None:
            raise EngineError(f"Cannot read source of a {value.kind} value")
        return self._call("source", str(value.ref.handle))

    def close(self) -> None:
        close = getattr(self._ctx, "close", None)
        if callable(close):
            close()

    # ------------------------------------------------------------------
    # Internal helpers

    def _call(self, helper: str, *args: str) -> str:
        expression = f"__jsbind.{helper}({', '.join(args)})"
        result = self._eval(expression, "<introspection>")
        if not isinstance(result, str):
            raise EngineError(f"Unexpected result from {helper}: {result!r}")
        return result

    def _eval(self, source: str, filename: str) -> Any:
        try:
            return self._ctx.eval(source)
        except MiniRacerBaseException as exc:
            raise EngineError(f"{filename}: {exc}") from exc

    @staticmethod
    def _describe(payload: str) -> JSValue:
        data: Dict[str, Any] = json.loads(payload)
        ref = data.get("ref")
        return JSValue(
            kind=data["kind"],
            value=data.get("value"),
            ref=ObjectRef(ref) if isinstance(ref, int) else None,
            class_name=data.get("className", ""),
        )


__all__ = ["MiniRacerEngine"]
