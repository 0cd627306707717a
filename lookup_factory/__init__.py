"""Generic lookup-table entities exposed over a uniform REST surface."""
