"""Iterators over the elements of a list of triangles
"""


class EdgeIterator(object):
    """Iterator over all sides of the triangles in a list.

    Every item is a 2-tuple (edge, triangle). Edges shared by two
    triangles are thus given twice, once for each triangle.
    """

    def __init__(self, triangles):
        self.triangles = triangles
        self.current_idx = 0  # this is index in the list
        self.pos = -1  # this is index in the triangle (side)

    def __iter__(self):
        return self

    def next(self):
        if self.current_idx >= len(self.triangles):
            raise StopIteration()
        triangle = self.triangles[self.current_idx]
        self.pos += 1
        edge = triangle.edges()[self.pos]
        if self.pos == 2:
            self.pos = -1
            self.current_idx += 1
        return edge, triangle

    def __next__(self):
        return self.next()


class VertexIterator(object):
    """Iterator over the distinct vertices of a list of triangles,
    in the order in which they are first met.
    """

    def __init__(self, triangles):
        self.triangles = triangles
        self.visited = set()
        self.to_visit = [v for t in triangles for v in t.vertices]
        self.to_visit.reverse()

    def __iter__(self):
        return self

    def next(self):
        while self.to_visit:
            vertex = self.to_visit.pop()
            if vertex not in self.visited:
                self.visited.add(vertex)
                return vertex
        raise StopIteration()

    def __next__(self):
        return self.next()
