"""Frame capturing processors: reading frames from Y4M files."""