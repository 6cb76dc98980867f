from pathtracer.camera.camera import Camera, CameraConfig, sky_gradient

__all__ = ["Camera", "CameraConfig", "sky_gradient"]
