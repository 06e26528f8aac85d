"""Ready-made scenes: small demonstration scenes and randomly generated ones."""