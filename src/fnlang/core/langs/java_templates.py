"""Maven project boilerplate for Java functions."""

import xml.etree.ElementTree as ET
from pathlib import Path

FDK_RELEASE_REPO_URL = "https://dl.bintray.com/fnproject/fnproject"

_POM_NAMESPACE = "http://maven.apache.org/POM/4.0.0"

_REPOSITORIES_BLOCK = f"""
    <repositories>
        <repository>
            <id>fn-release-repo</id>
            <url>{FDK_RELEASE_REPO_URL}</url>
            <releases>
                <enabled>true</enabled>
            </releases>
            <snapshots>
                <enabled>false</enabled>
            </snapshots>
        </repository>
    </repositories>
"""


def render_pom(fdk_version: str, java_version: str, include_fdk_repository: bool) -> str:
    """Render pom.xml for the hello-world function.

    Args:
        fdk_version: Value of the fdk.version property
        java_version: Compiler source and target level ("8", "11")
        include_fdk_repository: Declare the FDK release repository, for versions
            that are not mirrored on Maven Central
    """
    repositories = _REPOSITORIES_BLOCK if include_fdk_repository else ""
    return f"""<?xml version="1.0" encoding="UTF-8"?>
<project xmlns="{_POM_NAMESPACE}"
         xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance"
         xsi:schemaLocation="{_POM_NAMESPACE} http://maven.apache.org/xsd/maven-4.0.0.xsd">
    <modelVersion>4.0.0</modelVersion>
    <properties>
        <project.build.sourceEncoding>UTF-8</project.build.sourceEncoding>
        <fdk.version>{fdk_version}</fdk.version>
    </properties>
    <groupId>com.example.fn</groupId>
    <artifactId>hello</artifactId>
    <version>1.0.0</version>
{repositories}
    <dependencies>
        <dependency>
            <groupId>com.fnproject.fn</groupId>
            <artifactId>api</artifactId>
            <version>${{fdk.version}}</version>
        </dependency>
        <dependency>
            <groupId>com.fnproject.fn</groupId>
            <artifactId>testing-core</artifactId>
            <version>${{fdk.version}}</version>
            <scope>test</scope>
        </dependency>
        <dependency>
            <groupId>com.fnproject.fn</groupId>
            <artifactId>testing-junit4</artifactId>
            <version>${{fdk.version}}</version>
            <scope>test</scope>
        </dependency>
        <dependency>
            <groupId>junit</groupId>
            <artifactId>junit</artifactId>
            <version>4.12</version>
            <scope>test</scope>
        </dependency>
    </dependencies>

    <build>
        <plugins>
            <plugin>
                <groupId>org.apache.maven.plugins</groupId>
                <artifactId>maven-compiler-plugin</artifactId>
                <version>3.3</version>
                <configuration>
                    <source>{java_version}</source>
                    <target>{java_version}</target>
                </configuration>
            </plugin>
            <plugin>
                <groupId>org.apache.maven.plugins</groupId>
                <artifactId>maven-surefire-plugin</artifactId>
                <version>2.22.1</version>
                <configuration>
                    <useSystemClassLoader>false</useSystemClassLoader>
                </configuration>
            </plugin>
        </plugins>
    </build>
</project>
"""


def read_pom_fdk_version(pom_path: Path) -> str | None:
    """Return the fdk.version property of a pom.xml, or None if it has none."""
    root = ET.fromstring(pom_path.read_bytes())
    ns = {"pom": _POM_NAMESPACE}
    value = root.findtext("./pom:properties/pom:fdk.version", namespaces=ns)
    if value is None:
        return None
    return value.strip()


HELLO_FUNCTION_SOURCE = """package com.example.fn;

public class HelloFunction {

    public String handleRequest(String input) {
        String name = (input == null || input.isEmpty()) ? "world"  : input;

        System.out.println("Inside Java Hello World function");
        return "Hello, " + name + "!";
    }

}
"""

HELLO_FUNCTION_TEST_SOURCE = """package com.example.fn;

import com.fnproject.fn.testing.*;
import org.junit.*;

import static org.junit.Assert.*;

public class HelloFunctionTest {

    @Rule
    public final FnTestingRule testing = FnTestingRule.createDefault();

    @Test
    public void shouldReturnGreeting() {
        testing.givenEvent().enqueue();
        testing.thenRun(HelloFunction.class, "handleRequest");

        FnResult result = testing.getOnlyResult();
        assertEquals("Hello, world!", result.getBodyAsString());
    }

}
"""
