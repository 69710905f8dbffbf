"""Basic navigation example using the built-in DI container."""

from api_learn import AppRoutes, DIContainer


def main() -> None:
    navigator = DIContainer.create_navigator()

    screen = navigator.to(AppRoutes.GET_REQUEST)
    controller = screen.controller
    print("Screen:", screen.title)
    print("Posts loaded:", len(controller.posts))
    if controller.error_message:
        print("Error:", controller.error_message)

    navigator.back()
    print("Stack:", navigator.stack)


if __name__ == "__main__":
    main()
