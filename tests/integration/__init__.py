"""
Integration Tests - Components Working Together.

Test Files:
    - test_collection_workflows.py: Query chains, map projections and
      YAML-configured containers
"""
