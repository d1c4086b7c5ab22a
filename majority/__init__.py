"""Rank skaters with the majority system from raw judge marks."""
