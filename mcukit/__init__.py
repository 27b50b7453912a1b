"""Signal generators, running statistics, small data structures, an XML writer and I2C drivers."""

__version__ = "0.1.0"