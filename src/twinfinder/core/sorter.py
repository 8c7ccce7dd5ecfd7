"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/sorter.py
Pure sorting logic for duplicate groups — zero dependencies outside core.
The first record of a sorted group is the one the selection pass keeps.
"""
from typing import List
from twinfinder.core.models import DuplicateGroup, SortOrder


class Sorter:
    """
    Sorts files inside duplicate groups according to specified order.
    Modifies groups in-place.
    - FIRST_FOUND: discovery order is left untouched
    - SHORTEST_PATH: fewest path components first, then lexical path
    - SHORTEST_FILENAME: shortest basename first, then lexical path
    - LEXICAL: smallest path first
    """

    @staticmethod
    def sort_files_inside_groups(groups: List[DuplicateGroup], sort_order: SortOrder = None) -> None:
        if not groups:
            return

        if sort_order is None or sort_order == SortOrder.FIRST_FOUND:
            return

        if sort_order == SortOrder.SHORTEST_PATH:
            key_func = lambda f: (f.path_depth, len(f.path), f.path)
        elif sort_order == SortOrder.SHORTEST_FILENAME:
            key_func = lambda f: (len(f.name), f.path)
        else:
            key_func = lambda f: f.path

        for group in groups:
            group.files.sort(key=key_func)
