"""HTTP host for mdlistsort."""
