"""System-wide architecture, coordination, entropy and memory models."""