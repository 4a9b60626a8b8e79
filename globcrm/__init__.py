"""GlobCRM API: merge-field catalog and permission-scoped global search."""
