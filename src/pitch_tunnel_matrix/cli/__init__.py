from pitch_tunnel_matrix.cli.app import app

__all__ = ["app"]
