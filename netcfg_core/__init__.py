"""
netcfg-core package

This package models network interface definitions (physical NICs, bonds,
bridges and VLANs) and renders them into /etc/network/interfaces syntax.
"""
