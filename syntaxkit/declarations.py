"""Parsers for top-level declarations: functions, structs and their parameters."""

from __future__ import annotations

from typing import List, Optional

from .ast import FnDecl, Param, Prop, StructDecl
from .common import parse_id, parse_two_ids
from .scanner import Scanner
from .statements import parse_block

__all__ = ["parse_param", "parse_fn_decl", "parse_struct_decl"]


def parse_param(scn: Scanner) -> Optional[Param]:
    """Parse ``name : type``."""
    pair = parse_two_ids(scn)
    if pair is None:
        return None
    return Param(*pair)


def parse_fn_decl(scn: Scanner) -> Optional[FnDecl]:
    """Parse ``[ns.]name : (params) -> type``, a body and a closing ``.``."""
    ns = None
    name = parse_id(scn)
    if name is None:
        return None

    trial = scn.copy()
    if trial.has("."):
        ns = name
        name = parse_id(trial)
        if name is None:
            return None
        scn.replace(trial)

    scn.skip_spaces()
    if scn.scan(":") is None:
        return None
    scn.skip_spaces()
    params = _parse_params(scn)
    if params is None:
        return None
    scn.skip_spaces()
    if scn.scan("->") is None:
        return None
    scn.skip_spaces()
    ret_type = parse_id(scn)
    if ret_type is None:
        return None
    scn.skip_spaces()
    scn.skip_newline()
    block = parse_block(scn)
    scn.skip_spaces()
    if scn.scan(".") is None:
        return None

    return FnDecl(ns, name, params, ret_type, block)


def _parse_params(scn: Scanner) -> Optional[List[Param]]:
    if scn.scan("(") is None:
        return None
    scn.skip_spaces()

    params = []
    first = parse_param(scn)
    if first is not None:
        params.append(first)
        while True:
            scn.skip_spaces()
            if not scn.has(","):
                break
            scn.skip_spaces()
            param = parse_param(scn)
            if param is None:
                return None
            params.append(param)

    scn.skip_spaces()
    if scn.scan(")") is None:
        return None
    return params


def parse_struct_decl(scn: Scanner) -> Optional[StructDecl]:
    """Parse ``Name : struct``, one ``prop : type`` per line and a closing ``.``."""
    name = parse_id(scn)
    if name is None:
        return None
    scn.skip_spaces()
    if scn.scan(":") is None:
        return None
    scn.skip_spaces()
    if scn.scan("struct") is None:
        return None
    scn.skip_spaces()
    scn.skip_newline()

    props = []
    while True:
        trial = scn.copy()
        prop = _parse_prop(trial)
        if prop is None:
            break
        scn.replace(trial)
        props.append(prop)

    scn.skip_spaces()
    if scn.scan(".") is None:
        return None

    return StructDecl(name, props)


def _parse_prop(scn: Scanner) -> Optional[Prop]:
    scn.skip_spaces()
    prop = parse_param(scn)
    if prop is None:
        return None
    scn.skip_spaces()
    scn.skip_newline()
    return prop