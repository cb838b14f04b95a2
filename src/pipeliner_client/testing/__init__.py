"""Testing – in-memory doubles for the transport and the fetch collaborator."""
