"""Platform services shared across rpaths layers."""
