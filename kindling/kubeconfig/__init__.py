"""Reading, encoding, merging, locking and removing cluster entries in kubeconfig files."""