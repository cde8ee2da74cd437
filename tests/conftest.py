from pathlib import Path

import pytest

PBXPROJ_TEXT = """\
// !$*UTF8*$!
{
\tobjects = {
/* Begin XCBuildConfiguration section */
\t\t249021D3217E4FDB00AE95B9 /* Profile */ = {
\t\t\tisa = XCBuildConfiguration;
\t\t\tbuildSettings = {
\t\t\t\tASSETCATALOG_COMPILER_APPICON_NAME = AppIcon;
\t\t\t\tINFOPLIST_FILE = Runner/Info.plist;
\t\t\t\tPRODUCT_BUNDLE_IDENTIFIER = com.example.myApp;
\t\t\t\tPRODUCT_NAME = "$(TARGET_NAME)";
\t\t\t};
\t\t\tname = Profile;
\t\t};
\t\t331C8088294A63A400263BE5 /* Debug */ = {
\t\t\tisa = XCBuildConfiguration;
\t\t\tbuildSettings = {
\t\t\t\tBUNDLE_LOADER = "$(TEST_HOST)";
\t\t\t\tPRODUCT_BUNDLE_IDENTIFIER = com.example.myApp.RunnerTests;
\t\t\t\tTEST_HOST = "$(BUILT_PRODUCTS_DIR)/Runner.app/Runner";
\t\t\t};
\t\t\tname = Debug;
\t\t};
\t\t97C147061CF9000F007C117D /* Debug */ = {
\t\t\tisa = XCBuildConfiguration;
\t\t\tbuildSettings = {
\t\t\t\tINFOPLIST_FILE = Runner/Info.plist;
\t\t\t\tPRODUCT_BUNDLE_IDENTIFIER = com.example.myApp;
\t\t\t};
\t\t\tname = Debug;
\t\t};
\t\t97C147071CF9000F007C117D /* Release */ = {
\t\t\tisa = XCBuildConfiguration;
\t\t\tbuildSettings = {
\t\t\t\tINFOPLIST_FILE = Runner/Info.plist;
\t\t\t\tPRODUCT_BUNDLE_IDENTIFIER = com.example.myApp;
\t\t\t};
\t\t\tname = Release;
\t\t};
/* End XCBuildConfiguration section */
\t};
}
"""

INFO_PLIST_TEXT = (
    '<?xml version="1.0" encoding="UTF-8"?>\r\n'
    "<plist version=\"1.0\">\r\n"
    "<dict>\r\n"
    "\t<key>CFBundleDevelopmentRegion</key>\r\n"
    "\t<string>$(DEVELOPMENT_LANGUAGE)</string>\r\n"
    "\t<key>CFBundleDisplayName</key>\r\n"
    "\t<string>My App</string>\r\n"
    "\t<key>CFBundleName</key>\r\n"
    "\t<string>my_app</string>\r\n"
    "</dict>\r\n"
    "</plist>\r\n"
)


@pytest.fixture
def pbxproj_lines() -> list[str]:
    return PBXPROJ_TEXT.split("\n")


@pytest.fixture
def flutter_project(tmp_path) -> Path:
    """A project root with the default ios/ layout."""
    runner = tmp_path / "ios" / "Runner"
    xcodeproj = tmp_path / "ios" / "Runner.xcodeproj"
    runner.mkdir(parents=True)
    xcodeproj.mkdir(parents=True)
    (runner / "Info.plist").write_bytes(INFO_PLIST_TEXT.encode("utf-8"))
    (xcodeproj / "project.pbxproj").write_bytes(PBXPROJ_TEXT.encode("utf-8"))
    return tmp_path
