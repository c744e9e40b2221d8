# tests/__init__.py
"""
Test suite for tag_lexicon.

Corpora are written to pytest's tmp_path by the fixtures in conftest.py;
nothing here touches the network or files outside the temp directory.
"""
