#!/usr/bin/env python3
"""Example: Quickstart — todostore

Minimal working example: create todos, rename and remove tags,
replace a record, and handle the store's error types.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install todostore
"""
from __future__ import annotations

import todostore
from todostore.serializer import TodoSerializer


def main() -> None:
    print(f"todostore version: {todostore.__version__}")
    store = todostore.TodoStore()
    serializer = TodoSerializer()

    # Step 1: Create a few todos
    milk = store.add(todostore.TodoData(content="Buy milk", tags=("home", "errand")))
    report = store.add(todostore.TodoData(content="Write report", category="work"))
    print(f"Created {len(store)} todos, last id {store.last_id}")

    # Step 2: Rename a tag, then try the same rename again
    store.update_tag_by_id(milk.id, "errand", "weekend")
    try:
        store.update_tag_by_id(milk.id, "errand", "weekend")
    except todostore.TagNotFoundError as exc:
        print(f"Expected failure: {exc}")

    # Step 3: Replace a record entirely
    store.update(report.id, todostore.TodoData(content="Send report", complete=True))

    # Step 4: Deleted ids are never reissued
    store.delete_by_id(milk.id)
    again = store.add(todostore.TodoData(content="Buy milk again"))
    print(f"New todo got id {again.id}")

    print(serializer.to_yaml(store.find_all()))


if __name__ == "__main__":
    main()
