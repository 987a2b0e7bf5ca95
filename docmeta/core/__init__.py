"""Shared configuration for docmeta."""
