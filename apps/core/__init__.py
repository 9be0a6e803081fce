"""Shared plumbing for talking to the Supabase backend."""
