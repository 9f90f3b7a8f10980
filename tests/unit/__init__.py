"""
Unit Tests - Testing Individual Components in Isolation.

Unit tests should be fast, deterministic, and focused.

Test Files:
    - test_cursor.py: Cursor protocol
    - test_selectors.py: Field selector resolution
    - test_query_operators.py: Shared operator set
    - test_ordered_list.py / test_stack.py / test_queue.py: Variants
    - test_keyed_map.py: Unique-key map
    - test_config_loader.py: Configuration loading/validation
    - test_field_prover.py: Field-level checks
"""
