"""Import of Wavefront OBJ meshes into items."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from . import logger
from .item import Item

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass
class MeshVertex:
    """A vertex with its position and texture coordinate."""

    position: tuple[float, float, float]
    texcoord: tuple[float, float]


@dataclass
class Mesh:
    """Raw positions and texture coordinates plus the expanded vertex list."""

    positions: list[float] = field(default_factory=list)
    texcoords: list[float] = field(default_factory=list)
    vertices: list[MeshVertex] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)


def _floats(tokens: list[str], count: int) -> list[float] | None:
    if len(tokens) < count:
        return None
    try:
        return [float(token) for token in tokens[:count]]
    except ValueError:
        return None


def _leading_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"Wavefront :: Invalid index: {text!r}")
    return int(match.group(1))


def _face_indices(tokens: list[str]) -> list[int]:
    """Read plain integer indices, stopping at the first token that is not one."""
    face = []
    for token in tokens:
        match = _LEADING_INT.match(token)
        if match is None:
            break
        face.append(int(match.group(1)) - 1)
        if match.end() != len(token):
            break
    return face


def _fan(count: int):
    """Corner positions of a triangle fan over a polygon of ``count`` corners."""
    for i in range(2, count):
        yield 0, i - 1, i


def has_texture_coordinates(filename: str) -> bool:
    """Tell whether the file has any "vt" lines; False if it cannot be read."""
    try:
        with open(filename, encoding="utf-8", errors="replace") as handle:
            return any(line.startswith("vt ") for line in handle)
    except OSError:
        return False


def parse_geometry(filename: str) -> tuple[list[float], list[int]]:
    """Return flat ``x, y, z`` positions and triangulated zero-based indices."""
    vertices: list[float] = []
    indices: list[int] = []
    try:
        handle = open(filename, encoding="utf-8", errors="replace")
    except OSError:
        logger.error(f"Wavefront :: Error opening file: {filename}")
        raise
    with handle:
        for line in handle:
            tokens = line.split()
            if not tokens:
                continue
            kind, rest = tokens[0], tokens[1:]
            if kind == "v":
                position = _floats(rest, 3)
                if position is not None:
                    vertices.extend(position)
            elif kind == "f":
                face = _face_indices(rest)
                for a, b, c in _fan(len(face)):
                    indices.extend((face[a], face[b], face[c]))
    return vertices, indices


def parse_geometry_with_uv(filename: str) -> Mesh:
    """Read positions, texture coordinates and "v/t" faces into a Mesh.

    Each triangle corner becomes its own vertex, indexed in order.
    """
    mesh = Mesh()
    try:
        handle = open(filename, encoding="utf-8", errors="replace")
    except OSError:
        logger.error(f"Wavefront :: Error opening file: {filename}")
        raise
    with handle:
        lines = handle.read().splitlines()

    for line in lines:
        tokens = line.split()
        if not tokens:
            continue
        kind, rest = tokens[0], tokens[1:]
        if kind == "v":
            position = _floats(rest, 3)
            if position is not None:
                mesh.positions.extend(position)
        elif kind == "vt":
            uv = _floats(rest, 2)
            if uv is not None:
                mesh.texcoords.extend(uv)

    vertex_count = len(mesh.positions) // 3
    texcoord_count = len(mesh.texcoords) // 2
    for line in lines:
        if not line.startswith("f"):
            continue
        face = []
        for token in line[2:].split():
            head, slash, tail = token.partition("/")
            if slash:
                face.append((_leading_int(head) - 1, _leading_int(tail) - 1))

        for corners in _fan(len(face)):
            for corner in corners:
                v, t = face[corner]
                if not 0 <= v < vertex_count:
                    raise IndexError(f"Wavefront :: Vertex index out of range: {v + 1}")
                if not 0 <= t < texcoord_count:
                    raise IndexError(f"Wavefront :: Texture index out of range: {t + 1}")
                position = tuple(mesh.positions[v * 3 : v * 3 + 3])
                texcoord = tuple(mesh.texcoords[t * 2 : t * 2 + 2])
                mesh.vertices.append(MeshVertex(position, texcoord))
                mesh.indices.append(len(mesh.vertices) - 1)
    return mesh


def item_name(filename: str) -> str:
    """The file's base name without directory or extension."""
    cut = max(filename.rfind("/"), filename.rfind("\\"))
    base = filename[cut + 1 :]
    dot = base.rfind(".")
    return base if dot == -1 else base[:dot]


def import_file(filename: str) -> Item:
    """Build an Item from an OBJ file, with texture coordinates if it has any."""
    has_uv = has_texture_coordinates(filename)
    logger.info(
        f"Wavefront :: File {filename}{' has' if has_uv else ' does not have'} texture coordinates"
    )
    name = item_name(filename)

    if not has_uv:
        vertices, indices = parse_geometry(filename)
        return Item(name, vertices, indices)

    mesh = parse_geometry_with_uv(filename)
    data: list[float] = []
    for vertex in mesh.vertices:
        data.extend(vertex.position)
        data.extend(vertex.texcoord)
    return Item(name, data, mesh.indices)