from pathtracer.camera.camera import Camera
