"""Process-wide settings exposed as command-line options.

Each setting is an `Option` declared once at module level.  `setup` adds
every declared option to an argparse parser and `read` copies the parsed
values back, so library code only ever looks at `option.value`.
"""
from __future__ import annotations
from typing import List, Tuple

_OPTS: List["Option"] = []

class Option:
	def __init__(self, name: str, type: type, default, description: str = "") -> None:
		assert type in (bool, str, int)
		self.name = name
		self.type = type
		self.default = default
		self.value = default
		self.description = description
		_OPTS.append(self)
	def __bool__(self) -> bool:
		raise TypeError(f"Option '{self.name}' used as a boolean; read `.value` instead")
	def __repr__(self) -> str:
		return f"Option({self.name!r}, value={self.value!r})"

def _argname(o: Option) -> str:
	if o.type is bool and o.default:
		return "no-" + o.name
	return o.name

def setup(parser) -> None:
	for o in _OPTS:
		n = _argname(o)
		if o.type is bool:
			parser.add_argument("--" + n, action="store_true", default=False, help=o.description)
		else:
			parser.add_argument("--" + n, type=o.type, default=o.default,
				help=f"{o.description} (default={o.default!r})")

def split_flags(argv: List[str]) -> Tuple[List[str], List[str]]:
	"""Separate registered flags from everything else, keeping word order.

	Words such as "-x+1" look like options to argparse, so only the flags
	declared here (plus -h/--help) are handed to it. A "--" ends flag parsing.
	"""
	flags: List[str] = []
	words: List[str] = []
	known = {"--" + _argname(o): o for o in _OPTS}
	i = 0
	while i < len(argv):
		a = argv[i]
		if a == "--":
			words.extend(argv[i+1:])
			break
		name = a.split("=", 1)[0]
		if a in ("-h", "--help"):
			flags.append(a)
		elif name in known:
			flags.append(a)
			if known[name].type is not bool and "=" not in a and i + 1 < len(argv):
				i += 1
				flags.append(argv[i])
		else:
			words.append(a)
		i += 1
	return flags, words

def read(args) -> None:
	for o in _OPTS:
		v = getattr(args, _argname(o).replace("-", "_"))
		if o.type is bool and o.default:
			v = not v
		o.value = v

def snapshot() -> dict:
	return {o.name: o.value for o in _OPTS}

def restore(snap: dict) -> None:
	for o in _OPTS:
		o.value = snap.get(o.name, o.value)

check_rep = Option("check-rep", bool, True,
	description="Assert representation invariants after every construction")
verbose = Option("verbose", bool, False, description="Log every stack operation")
